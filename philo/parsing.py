"""Command-line argument parsing and validation for the simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

__all__ = [
    "ArgumentError",
    "Settings",
    "parse_int",
    "parse_positive_long",
    "check_input",
    "parse_settings",
    "MAX_PHILOS",
    "INIT_MESSAGE",
]

MAX_PHILOS = 200
INT_MAX = 2**31 - 1
LONG_MAX = 2**63 - 1
INIT_MESSAGE = "Initialization successful."

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the command-line arguments are unusable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    num_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    min_meals: Optional[int] = None


def parse_int(text: str) -> int:
    """Parse a leading signed integer leniently, wrapping to 32 bits.

    Leading whitespace is skipped, one sign is accepted, and parsing stops
    at the first non-digit. Text without digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    value = sign * int("".join(digits)) if digits else 0
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def parse_positive_long(text: str) -> int:
    """Parse a strictly positive integer that fits in a signed 64-bit value.

    Leading whitespace and a single ``+`` are allowed; anything else that
    is not a digit, a minus sign, zero, or an overflow raises ValueError.
    """
    rest = text.lstrip(_WHITESPACE)
    if not rest or rest[0] == "-":
        raise ValueError(f"not a positive integer: {text!r}")
    if rest[0] == "+":
        rest = rest[1:]
    if any(char not in _DIGITS for char in rest):
        raise ValueError(f"not a positive integer: {text!r}")
    value = int(rest) if rest else 0
    if value > LONG_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    if value == 0:
        raise ValueError(f"not a positive integer: {text!r}")
    return value


def _validate(args: Sequence[str]) -> None:
    if len(args) not in (4, 5):
        raise ArgumentError(
            "Error: Invalid number of arguments. Expected 4 or 5 arguments."
        )
    if parse_int(args[0]) > MAX_PHILOS:
        raise ArgumentError(
            f"Error: Number of philosophers cannot exceed {MAX_PHILOS}."
        )
    for arg in args:
        try:
            value = parse_positive_long(arg)
        except ValueError:
            value = -1
        if value <= 0 or value > INT_MAX:
            raise ArgumentError(
                "Error: Arguments must be valid integers within range."
            )


def check_input(args: Sequence[str]) -> None:
    """Validate the arguments (program name excluded) and announce success.

    Raises ArgumentError with the user-facing message on bad input.
    """
    _validate(args)
    print(INIT_MESSAGE, flush=True)


def parse_settings(args: Sequence[str]) -> Settings:
    """Validate the arguments and build the simulation settings."""
    _validate(args)
    return Settings(
        num_philos=parse_int(args[0]),
        time_to_die=parse_positive_long(args[1]),
        time_to_eat=parse_positive_long(args[2]),
        time_to_sleep=parse_positive_long(args[3]),
        min_meals=parse_int(args[4]) if len(args) == 5 else None,
    )
import pytest

from philo.parsing import (
    ArgumentError,
    INIT_MESSAGE,
    Settings,
    check_input,
    parse_int,
    parse_positive_long,
    parse_settings,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42", -42),
        ("\t\n+7", 7),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        ("-", 0),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_parse_int_wraps_to_32_bits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("2147483648") == -2147483648


@pytest.mark.parametrize(
    "text, expected",
    [
        ("15", 15),
        ("  +15", 15),
        ("\v\f200", 200),
        ("9223372036854775807", 9223372036854775807),
    ],
)
def test_parse_positive_long_valid(text, expected):
    assert parse_positive_long(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "   ", "-1", "0", "+", "+0", "12a", "1 2", "++1", "9223372036854775808"],
)
def test_parse_positive_long_invalid(text):
    with pytest.raises(ValueError):
        parse_positive_long(text)


def test_check_input_success_prints_message(capsys):
    check_input(["5", "800", "200", "200"])
    assert capsys.readouterr().out == INIT_MESSAGE + "\n"


def test_check_input_accepts_meal_count(capsys):
    check_input(["200", "800", "200", "200", "7"])
    assert "Initialization successful." in capsys.readouterr().out


@pytest.mark.parametrize("args", [[], ["5", "800", "200"], ["1"] * 6])
def test_check_input_wrong_count(args):
    with pytest.raises(ArgumentError, match="Invalid number of arguments"):
        check_input(args)


def test_check_input_too_many_philosophers():
    with pytest.raises(ArgumentError, match="cannot exceed 200"):
        check_input(["201", "800", "200", "200"])


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["5", "-800", "200", "200"],
        ["5", "800", "abc", "200"],
        ["5", "800", "200", "2147483648"],
        ["5", "800", "200", "200", "0"],
    ],
)
def test_check_input_invalid_values(args, capsys):
    with pytest.raises(ArgumentError, match="valid integers within range"):
        check_input(args)
    assert capsys.readouterr().out == ""


def test_parse_settings_without_meals():
    settings = parse_settings(["4", "410", "200", "100"])
    assert settings == Settings(4, 410, 200, 100, None)


def test_parse_settings_with_meals():
    settings = parse_settings([" 5", "+800", "200", "150", "3"])
    assert settings.num_philos == 5
    assert settings.time_to_die == 800
    assert settings.time_to_eat == 200
    assert settings.time_to_sleep == 150
    assert settings.min_meals == 3


def test_parse_settings_prints_nothing(capsys):
    parse_settings(["2", "400", "100", "100"])
    assert capsys.readouterr().out == ""


def test_parse_settings_rejects_invalid():
    with pytest.raises(ArgumentError):
        parse_settings(["3", "0", "100", "100"])


def test_settings_is_immutable():
    settings = parse_settings(["2", "400", "100", "100"])
    with pytest.raises(AttributeError):
        settings.num_philos = 3
    assert settings.num_philos == 2
    assert settings == Settings(2, 400, 100, 100, None)
# philo

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread and repeatedly takes two forks, eats, sleeps and thinks, while a
monitor in the main thread watches for anyone who starves.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

The same entry point can be started with `python -m philo.cli`.

- `number_of_philosophers` – how many philosophers (and forks) sit at the
  table, at most 200.
- `time_to_die` – milliseconds a philosopher may go since the start of its
  last meal (or since the start of the run) before it dies.
- `time_to_eat` – milliseconds a meal takes; both forks are held during it.
- `time_to_sleep` – milliseconds spent sleeping after eating.
- `number_of_times_each_philosopher_must_eat` – optional; the simulation
  stops once every philosopher has eaten at least this many times.

Every argument must be a positive integer no larger than 2147483647, written
with optional leading whitespace and an optional `+`. On bad input an error
message is written to standard error and the command exits with status 1.

When the arguments are valid, the command first prints
`Initialization successful.` and then one line per state change:

```
<milliseconds since start> <philosopher id> <action>
```

The action is one of `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` or `died`. Philosophers with an even id reach for their left
fork first, those with an odd id for their right fork first, and odd ids
start by thinking for half a meal's time. A lone philosopher takes its only
fork and waits until it dies. The run ends when a philosopher dies or when
every philosopher has eaten enough; no lines are printed after that.

### Examples

```
philo 5 800 200 200
philo 4 410 200 200 7
philo 1 800 200 200
```

## Library use

```python
import sys

from philo.parsing import parse_settings
from philo.table import Table

settings = parse_settings(["5", "800", "200", "200", "3"])
Table(settings, sys.stdout).run()
```

- `philo.parsing.parse_settings(args)` validates the arguments (without the
  program name) and returns a frozen `Settings` dataclass with `num_philos`,
  `time_to_die`, `time_to_eat`, `time_to_sleep` and `min_meals` (`None` when
  not given). Invalid input raises `ArgumentError`, a `ValueError` subclass
  carrying the user-facing message.
- `philo.parsing.check_input(args)` performs the same validation and prints
  `Initialization successful.` on success.
- `philo.parsing.parse_int` and `philo.parsing.parse_positive_long` are the
  lenient and strict integer parsers used for the arguments.
- `philo.table.Table(settings, output)` holds the forks and `Philosopher`
  records and writes its log lines to any text stream `output`. `run()`
  starts the threads, monitors them until the end and joins them; it raises
  `RuntimeError` if a thread cannot be started. `stopped()` reports whether
  the simulation has ended.
- `philo.timing.current_time_ms()` and `philo.timing.precise_sleep(ms)` are
  the millisecond clock and the polling sleep the simulation relies on.
- `philo.cli.main(argv=None)` is the function behind the `philo` command and
  returns the exit status.

## Running the tests

```
pip install ".[test]"
pytest
```
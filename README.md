# dining

A console simulation of the dining philosophers problem. Each philosopher
runs in its own thread. Neighbours at the round table share forks, and each
fork is a lock. A monitor checks how long each philosopher has gone without
eating. The simulation ends when one philosopher starves. If a meal count is
given, it also ends once every philosopher has eaten that many times.

## Installation

```
pip install .
```

## Usage

```
dining NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

`python -m dining.cli` takes the same arguments.

- `NUMBER_OF_PHILOSOPHERS`: from 1 to 200.
- `TIME_TO_DIE`, `TIME_TO_EAT`, `TIME_TO_SLEEP`: positive numbers of
  milliseconds.
- `MEALS` (optional, positive): the simulation stops once every philosopher
  has eaten this many times.

Numbers are read leniently. Leading whitespace and a single `+` are skipped,
and reading stops at the first character that is not a digit, so `12ms`
counts as 12. A value above 2147483647 is rejected.

Example:

```
dining 5 800 200 200 7
```

Each event goes on its own line, coloured with ANSI escape codes. A line
gives the milliseconds since the start, the philosopher's number (counting
from 1) and the event:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
...
810 3 died
```

After a death or after the last required meal, no further lines are printed.
A lone philosopher takes one fork, waits, and dies, because there is no
second fork.

If the arguments are wrong, the command prints `Error: <message>` and exits
with status 1. The message is `Invalid number of arguments` or
`Invalid arguments`. After a completed run the exit status is 0.

## Library use

```python
import io

from dining.settings import parse_settings
from dining.table import Table

settings = parse_settings(["4", "410", "200", "200", "3"])
out = io.StringIO()
victim = Table(settings, out).run()
print("starved:" if victim else "all ate", victim.id if victim else "")
```

- `dining.settings`
  - `parse_settings(args)` takes four or five argument strings and returns a
    frozen `Settings` with the fields `philosophers`, `time_to_die`,
    `time_to_eat`, `time_to_sleep` and `max_meals` (`None` when no meal count
    was given).
  - If the arguments are not valid, it raises `SettingsError`, which is a
    subclass of `ValueError`.
  - `parse_int(text)` is the lenient number reader described above. It
    returns `-1` for values that overflow.
- `dining.table`
  - `Table(settings, out)` writes the event lines to `out`, or to standard
    output if `out` is `None`.
  - `Table.run()` starts one thread per philosopher and monitors the table.
    It returns the `Philosopher` who starved, or `None` if everyone ate
    enough.
  - `Status` lists the reported events, each with its text and colour.
- `dining.clock`
  - `now_ms()` and `sleep_ms(duration_ms)` make up the millisecond
    wall-clock that the simulation uses.
- `dining.cli`
  - `main(argv=None)` is the command. It returns the exit status.

## Tests

```
pip install .[test]
pytest
```
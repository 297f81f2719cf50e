# rescuesim

A small console simulation of a hostage rescue mission. The messages the
program prints are in Polish.

A commando sneaks past six guards. Each guard gets a base chance of spotting
him, drawn between 10% and 19%. The guards are met one at a time, in random
order. At each living guard:

1. The guard makes a first detection check. Active item effects lower the
   chance for this check only. Each active effect then counts down by one.
2. The guard makes a second detection check at his base chance.
3. If the guard has not raised the alarm, the commando tries to take him
   out. The chance is 50%, or 80% once the silencer is fitted.
4. The commando may then use one unused item. Each unused item is
   considered in turn, with a 50% chance of being picked.

If either check spots the commando, the mission fails at once. If no guard
raises the alarm, both hostages are rescued and the mission succeeds.

The items are:

- **Granat dymny** (smoke grenade): multiplies the first detection check by
  0.7 for the next two encounters.
- **Granat hukowy** (flashbang): multiplies the first detection check by
  0.5 for the next two encounters.
- **Tłumik** (silencer): raises the chance of taking a guard out from 50% to
  80%.

## Installation

```
pip install .
```

## Running a mission

```
rescuesim
```

Options:

- `--seed N`: seed the random generator, so the same seed plays the same
  mission.
- `--log-dir DIR`: directory for `mission_log.csv`. The default is `logs`.
- `--no-delay`: skip all the pauses. Without it the mission runs in real
  time, with pauses between events.

After the mission ends, the program prints a summary:

- the mission time as `MM:SS:hh` (minutes, seconds, hundredths)
- the status, `SUKCES` or `NIEPOWODZENIE`
- how many guards were killed and how many are still alive
- how many items were never used
- the full mission log

Each run also appends one line to `mission_log.csv` in the log directory. The
directory is created if it is missing. The line holds these fields, in order:

- the duration in whole seconds, such as `3s`
- `Success` or `Fail`
- the number of killed guards
- the number of living guards
- the number of unused items
- the log entries, each followed by three spaces

If the line cannot be written, a message goes to standard error and the
mission still reports its result. If the mission itself raises an error, the
program prints `Błąd: ...` to standard error and exits with status 1.

## Using it from Python

```python
import random

from rescuesim.mission import Mission

mission = Mission(rng=random.Random(7), sleep=lambda seconds: None, log_dir="logs")
mission.run()
print(mission.summary())
print(mission.csv_row())
```

`Mission` takes these arguments:

- `rng`: a `random.Random`. Pass one to make runs repeatable.
- `sleep`: a function called with the number of seconds of each pause. Pass
  one to skip the pauses.
- `log_dir`: the directory for the CSV log.

After `run()`, the mission offers the following:

- `success`, `killed_guards` and `log_entries`
- `elapsed_ms`, `unused_items` and `csv_path`
- `guards`, `hostages` and `commando`

`log()`, `pause()`, `apply_flashbang_effect()` and `apply_smoke_effect()` are
the hooks the items act through.

The building blocks are:

- `rescuesim.agents`:
  - `Agent`, `Commando`, `Guard` and `Hostage`.
  - `speak()` prints the character's line and returns it.
  - `Guard.detect_commando(modifier)` scales the base chance and clamps it to
    [0, 1]. A dead guard never detects.
  - `Guard` raises `ValueError` for a chance outside [0, 1].
- `rescuesim.items`:
  - `Item`, `SmokeGrenade`, `Flashbang` and `Silencer`.
  - `use()` marks an item as spent.
  - `apply_effect(mission)` applies the item's effect.
- `rescuesim.logger`:
  - `write_csv(filename, data)` appends one line to a file.
  - It raises `ValueError` for empty data and `OSError` when the file cannot
    be opened.

## Tests

```
pip install ".[test]"
pytest
```
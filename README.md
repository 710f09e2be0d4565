# lessonkit

`lessonkit` is a Python library for working with a course of small Rust
exercises. Each exercise is a single `.rs` file that fails to compile, fails
its tests or upsets Clippy until the learner fixes it. The library reads the
course's exercise list, compiles and runs exercises with `rustc`, tells
pending exercises from finished ones, and writes a `rust-project.json` so that
rust-analyzer understands the exercise files.

It also ships `lessonkit.drills`, a set of worked reference solutions to the
course's topics written as plain Python.

## Requirements

- Python 3.11 or later
- `rustc` on your `PATH` to compile exercises (and `cargo` with Clippy for
  Clippy exercises)

## Installation

```
pip install .
```

## The course directory

A course directory holds an `info.toml` listing the exercises in the
recommended order:

```toml
[[exercises]]
name = "intro1"
path = "exercises/intro/intro1.rs"
mode = "compile"
hint = "No hints this time ;)"
```

`mode` is one of `compile`, `test` or `clippy`. An exercise is *pending* while
its file still holds a comment line such as `// I AM NOT DONE`; it looks done
once that line is gone.

## Exercises: `lessonkit.exercise`

```python
from pathlib import Path

from lessonkit.exercise import ExerciseFailed, load_exercises

exercises = load_exercises(Path("info.toml").read_text())
pending = [exercise for exercise in exercises if not exercise.looks_done()]
print(f"{len(pending)} exercises left")

exercise = pending[0]
try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except ExerciseFailed as failure:
    print(failure.output.stderr)
```

- `load_exercises(text)` parses `info.toml` text into `Exercise` objects and
  raises `ValueError` for a missing `exercises` list or an incomplete entry.
- `Exercise` has `name`, `path`, `mode` (a `Mode`: `COMPILE`, `TEST`,
  `CLIPPY`) and `hint`; `str(exercise)` is its path.
- `Exercise.compile()` runs `rustc` (with `--test` in test mode) into a
  temporary binary named by `temp_file()` in the current directory, and
  returns a `CompiledExercise`. In Clippy mode it writes
  `./exercises/clippy/Cargo.toml`, builds the binary, then runs `cargo clean`
  and `cargo clippy` with warnings as errors. A failed compilation removes
  the binary and raises `ExerciseFailed`, whose `output` is an
  `ExerciseOutput` with `stdout` and `stderr`.
- `CompiledExercise.run()` runs the binary (passing `--show-output` in test
  mode) and returns its `ExerciseOutput`, raising `ExerciseFailed` on a
  non-zero exit. `close()`, or leaving the `with` block, removes the binary;
  `clean()` does the same directly.
- `Exercise.state()` returns a `State`. `State.done` is true when the marker
  is gone; otherwise `State.context` holds the `ContextLine`s (`line`,
  1-based `number`, `important`) from two lines before the marker to two
  lines after it. `Exercise.looks_done()` is a shortcut for `state().done`.

## rust-analyzer support: `lessonkit.project`

```python
from lessonkit.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json()
project.write_to_disk()
```

`get_sysroot_src()` takes the standard library location from `RUST_SRC_PATH`
or, failing that, from `rustc --print sysroot`. `exercises_to_json()` adds a
`Crate` (edition 2021, `cfg` `["test"]`) for every `.rs` file below
`exercises/`. `to_json()` returns compact JSON and `write_to_disk()` writes
it to `./rust-project.json`.

## Terminal output: `lessonkit.ui`

`warn(message)` and `success(message)` print a red warning or green success
line. `bold`, `blue`, `red` and `green` wrap text in ANSI styles when
standard output is a terminal or `CLICOLOR_FORCE` is set to a non-zero value,
and never when `CLICOLOR=0`. Setting `NO_EMOJI` (checked by `no_emoji()`)
replaces emoji with plain characters.

## Reference solutions: `lessonkit.drills`

- `quizzes` – `calculate_price_of_apples`, a `transformer` over `Uppercase`,
  `Trim` and `Append` commands, and `ReportCard`.
- `errors` – `generate_nametag_text`, `total_cost`,
  `PositiveNonzeroInteger.new` and `parse_pos_nonzero` with their error
  classes.
- `tables` – fruit baskets (`basic_fruit_basket`, `fill_fruit_basket`) and
  `build_scores_table` of `Team`s.
- `basics` – `bigger`, `foo_if_fizz`, `sale_price`, `is_even`, `square`,
  `vec_loop`, `vec_map`, `maybe_icecream` and a `MessageState` driven by
  `ChangeColor`, `Echo`, `Move` and `Quit` messages.
- `iterators` – word capitalising, checked `divide`, `factorial` and
  `Progress` counting.
- `text` – `trim_me`, `compose_me`, `replace_me` and `append_bar`.
- `models` – `Order`, `Package`, `Licensed` software and a generic `Wrapper`.

## What it does not do

`lessonkit` is a library only. It installs no command-line program: there is
no welcome screen, no command to verify the whole course in order with a
progress bar, no watch mode that re-checks on file changes, and no commands to
list exercises, print hints or reset an exercise with git. A program that
wants these builds them on the classes above.

## Running the tests

```
pip install ".[test]"
pytest
```
"""Exercises: their description, compilation, execution and completion state."""

from __future__ import annotations

import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from lessonkit import ui

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a binary path unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """One source line shown around a pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a command."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """Compiling or running an exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _execute(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


def _output_of(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(stdout=_decode(result.stdout), stderr=_decode(result.stderr))


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the compiled binary, raising ExerciseFailed on a non-zero exit."""
        return self.exercise._run()

    def close(self) -> None:
        """Remove the compiled binary."""
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


@dataclass
class Exercise:
    """An exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = field(default="")

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def _rustc_args(self, *extra: str) -> list[str]:
        return [
            "rustc",
            *extra,
            str(self.path),
            "-o",
            temp_file(),
            *RUSTC_COLOR_ARGS,
            *RUSTC_EDITION_ARGS,
        ]

    def _compile_clippy(self) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        error_message = (
            "Failed to write Clippy Cargo.toml file."
            if ui.no_emoji()
            else "Failed to write 📎 Clippy 📎 Cargo.toml file."
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as exc:
            raise RuntimeError(error_message) from exc
        # Build a binary too so that clippy exercises can be run; a failure
        # here shows up again when clippy compiles.
        _execute(self._rustc_args())
        # A clean is needed for clippy to report every lint.
        _execute(["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS])
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ]
        )

    def compile(self) -> CompiledExercise:
        """Compile the exercise, raising ExerciseFailed if compilation fails."""
        if self.mode is Mode.COMPILE:
            result = _execute(self._rustc_args())
        elif self.mode is Mode.TEST:
            result = _execute(self._rustc_args("--test"))
        else:
            result = self._compile_clippy()

        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailed(_output_of(result))

    def _run(self) -> ExerciseOutput:
        arg = "--show-output" if self.mode is Mode.TEST else ""
        result = _execute([temp_file(), arg])
        output = _output_of(result)
        if result.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def state(self) -> State:
        """Return the completion state based on the pending marker comment."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (index for index, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError("pending marker spans several lines")

        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=index + 1, important=index == matched)
                for index, line in enumerate(lines)
                if first <= index <= last
            )
        )

    def looks_done(self) -> bool:
        """Return True when the pending marker has been removed."""
        return self.state().done


def _exercise_from_entry(entry: dict) -> Exercise:
    try:
        return Exercise(
            name=entry["name"],
            path=Path(entry["path"]),
            mode=Mode(entry["mode"]),
            hint=entry["hint"],
        )
    except (KeyError, TypeError) as exc:
        raise ValueError(f"invalid exercise entry: {exc}") from exc


def load_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from info.toml text."""
    data = tomllib.loads(text)
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError("missing 'exercises' list")
    return [_exercise_from_entry(entry) for entry in entries]
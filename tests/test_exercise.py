import subprocess
from pathlib import Path

import pytest

from lessonkit.exercise import (
    CompiledExercise,
    ContextLine,
    Exercise,
    ExerciseFailed,
    ExerciseOutput,
    Mode,
    State,
    clean,
    load_exercises,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


class FakeRunner:
    def __init__(self, returncode=0, stdout=b"", stderr=b""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        return subprocess.CompletedProcess(
            args, self.returncode, stdout=self.stdout, stderr=self.stderr
        )


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write(directory, name, text):
    path = directory / name
    path.write_text(text)
    return path


def test_clean(workdir, monkeypatch):
    runner = FakeRunner()
    monkeypatch.setattr(subprocess, "run", runner)
    Path(temp_file()).write_text("")
    exercise = Exercise(
        name="example",
        path=_write(workdir, "pending_exercise.rs", PENDING),
        mode=Mode.COMPILE,
        hint="",
    )
    compiled = exercise.compile()
    assert isinstance(compiled, CompiledExercise)
    compiled.close()
    assert not Path(temp_file()).exists()
    assert runner.calls[0][0] == "rustc"


def test_pending_state(workdir):
    exercise = Exercise(
        name="pending_exercise",
        path=_write(workdir, "pending_exercise.rs", PENDING),
        mode=Mode.COMPILE,
        hint="",
    )
    expected = (
        ContextLine(line="// fake_exercise", number=1, important=False),
        ContextLine(line="", number=2, important=False),
        ContextLine(line="// I AM NOT DONE", number=3, important=True),
        ContextLine(line="", number=4, important=False),
        ContextLine(line="fn main() {", number=5, important=False),
    )
    assert exercise.state() == State(expected)
    assert exercise.looks_done() is False


def test_finished_exercise(workdir):
    exercise = Exercise(
        name="finished_exercise",
        path=_write(workdir, "finished_exercise.rs", FINISHED),
        mode=Mode.COMPILE,
        hint="",
    )
    assert exercise.state() == State()
    assert exercise.looks_done() is True


def test_exercise_with_output(workdir, monkeypatch):
    runner = FakeRunner(stdout=b"running 1 test\nTHIS TEST TOO SHALL PASS\n")
    monkeypatch.setattr(subprocess, "run", runner)
    exercise = Exercise(
        name="exercise_with_output",
        path=_write(workdir, "testSuccess.rs", "#[test]\nfn passing() {}\n"),
        mode=Mode.TEST,
        hint="",
    )
    with exercise.compile() as compiled:
        out = compiled.run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert "--test" in runner.calls[0]
    assert runner.calls[1] == [temp_file(), "--show-output"]


def test_marker_at_top_clamps_context(workdir):
    exercise = Exercise("top", _write(workdir, "top.rs", "// I AM NOT DONE\n\nfn a() {}\nfn b() {}\n"), Mode.COMPILE)
    context = exercise.state().context
    assert [line.number for line in context] == [1, 2, 3]
    assert [line.important for line in context] == [True, False, False]


def test_marker_split_across_lines_is_an_error(workdir):
    exercise = Exercise("odd", _write(workdir, "odd.rs", "//\nI AM NOT DONE\n"), Mode.COMPILE)
    with pytest.raises(RuntimeError):
        exercise.state()


def test_compile_failure_raises_and_cleans(workdir, monkeypatch):
    runner = FakeRunner(returncode=1, stderr=b"error: expected pattern")
    monkeypatch.setattr(subprocess, "run", runner)
    Path(temp_file()).write_text("")
    exercise = Exercise("broken", _write(workdir, "compFailure.rs", "fn main() {\n    let\n}\n"), Mode.COMPILE)
    with pytest.raises(ExerciseFailed) as info:
        exercise.compile()
    assert info.value.output == ExerciseOutput(stdout="", stderr="error: expected pattern")
    assert not Path(temp_file()).exists()


def test_run_failure_raises(workdir, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeRunner())
    exercise = Exercise("runs", _write(workdir, "compSuccess.rs", "fn main() {}\n"), Mode.COMPILE)
    compiled = exercise.compile()
    failing = FakeRunner(returncode=101, stdout=b"out", stderr=b"panicked")
    monkeypatch.setattr(subprocess, "run", failing)
    with pytest.raises(ExerciseFailed) as info:
        compiled.run()
    assert info.value.output.stderr == "panicked"
    assert failing.calls[0] == [temp_file(), ""]
    compiled.close()


def test_clippy_writes_manifest_and_runs_cargo(workdir, monkeypatch):
    (workdir / "exercises" / "clippy").mkdir(parents=True)
    runner = FakeRunner()
    monkeypatch.setattr(subprocess, "run", runner)
    exercise = Exercise("clippy1", _write(workdir, "clippy1.rs", "fn main() {}\n"), Mode.CLIPPY)
    with exercise.compile():
        pass
    manifest = (workdir / "exercises" / "clippy" / "Cargo.toml").read_text()
    assert 'name = "clippy1"' in manifest
    assert 'path = "clippy1.rs"' in manifest
    assert [call[:2] for call in runner.calls] == [
        ["rustc", str(exercise.path)],
        ["cargo", "clean"],
        ["cargo", "clippy"],
    ]
    assert runner.calls[2][-2:] == ["-D", "clippy::float_cmp"]


def test_clean_ignores_missing_file(workdir):
    clean()
    assert not Path(temp_file()).exists()


def test_display_is_path():
    exercise = Exercise("intro1", Path("exercises/intro/intro1.rs"), Mode.COMPILE)
    assert str(exercise) == str(Path("exercises/intro/intro1.rs"))


def test_load_exercises():
    text = (
        '[[exercises]]\nname = "intro1"\npath = "exercises/intro/intro1.rs"\n'
        'mode = "compile"\nhint = "No hints this time ;)"\n\n'
        '[[exercises]]\nname = "tests1"\npath = "exercises/tests/tests1.rs"\n'
        'mode = "test"\nhint = "Hello!"\n'
    )
    exercises = load_exercises(text)
    assert [e.name for e in exercises] == ["intro1", "tests1"]
    assert [e.mode for e in exercises] == [Mode.COMPILE, Mode.TEST]
    assert exercises[1].hint == "Hello!"
    assert exercises[0].path == Path("exercises/intro/intro1.rs")


def test_load_exercises_rejects_bad_entries():
    with pytest.raises(ValueError):
        load_exercises('[[exercises]]\nname = "x"\npath = "x.rs"\nmode = "compile"\n')
    with pytest.raises(ValueError):
        load_exercises('[[exercises]]\nname = "x"\npath = "x.rs"\nmode = "run"\nhint = ""\n')
    with pytest.raises(ValueError):
        load_exercises('title = "nothing"\n')
import errno
import signal
import sys

import psutil

from microshell.executor import launch, spawn
from microshell.status import Status

MISSING = "microshell-no-such-program-xyz"


def test_spawn_returns_exit_code() -> None:
    assert spawn([sys.executable, "-c", "import sys; sys.exit(3)"]) == 3


def test_spawn_passes_full_argv(capfd) -> None:
    code = "import sys; print(' '.join(sys.argv[1:]))"
    assert spawn([sys.executable, "-c", code, "a", "b"]) == 0
    assert capfd.readouterr().out == "a b\n"


def test_spawn_reports_death_by_signal() -> None:
    code = "import os, signal; os.kill(os.getpid(), signal.SIGTERM)"
    assert spawn([sys.executable, "-c", code]) == -signal.SIGTERM


def test_spawn_searches_path(tmp_path, monkeypatch, capfd) -> None:
    script = tmp_path / "hello-microshell"
    script.write_text("#!/bin/sh\necho found \"$@\"\n")
    script.chmod(0o755)
    monkeypatch.setenv("PATH", f"{tmp_path}:/usr/bin:/bin")

    assert spawn(["hello-microshell", "x"]) == 0
    assert capfd.readouterr().out == "found x\n"


def test_spawn_missing_program(capfd) -> None:
    assert spawn([MISSING]) is None
    err = capfd.readouterr().err
    assert err.startswith(f"microshell: {MISSING}:")


def test_spawn_not_executable(tmp_path, capfd) -> None:
    script = tmp_path / "plain.txt"
    script.write_text("not a program\n")
    script.chmod(0o644)

    assert spawn([str(script)]) is None
    assert str(script) in capfd.readouterr().err


def test_launch_always_continues(capfd) -> None:
    assert launch([sys.executable, "-c", "import sys; sys.exit(7)"]) is Status.CONTINUE
    assert launch([MISSING]) is Status.CONTINUE


def test_spawn_runs_script_without_interpreter_line(tmp_path, monkeypatch, capfd) -> None:
    script = tmp_path / "noshebang"
    script.write_text("echo ran \"$@\"\n")
    script.chmod(0o755)
    monkeypatch.setenv("PATH", f"{tmp_path}:/usr/bin:/bin")

    assert spawn(["noshebang", "a", "b"]) == 0
    captured = capfd.readouterr()
    assert captured.out == "ran a b\n"
    assert captured.err == ""


def test_spawn_reports_process_creation_failure(monkeypatch, capfd) -> None:
    def fail(args):
        raise OSError(errno.EAGAIN, "Resource temporarily unavailable")

    monkeypatch.setattr(psutil, "Popen", fail)

    assert spawn(["true"]) is None
    assert launch(["true"]) is Status.CONTINUE
    err = capfd.readouterr().err
    assert err.count("microshell: Resource temporarily unavailable\n") == 2

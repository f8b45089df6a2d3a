import errno
import shutil
import sys

import psutil

from microshell.config import SHELL_NAME, FALLBACK_INTERPRETER
from microshell.status import Status


def _start(args):
    """
    Start args[0] the way execvp does: search PATH, and hand a file the
    kernel refuses to execute (no #! line) to /bin/sh as a script.
    Returns: psutil.Popen
    """
    try:
        return psutil.Popen(args)
    except OSError as e:
        if e.errno != errno.ENOEXEC or e.filename is None:
            raise
    script = shutil.which(args[0]) or args[0]
    return psutil.Popen([FALLBACK_INTERPRETER, script] + list(args[1:]))


def spawn(args):
    """
    Run an external program in the foreground and wait for it.
    args[0] is looked up on PATH the way execvp does; the whole list
    becomes the program's argv. stdin/stdout/stderr are inherited.
    Returns: exit code, negated signal number if the child was killed,
    or None if the program could not be started.
    """
    # Anything the shell printed must reach the terminal before the child writes
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        proc = _start(args)
    except OSError as e:
        if e.filename is not None:
            # exec failed in the child, which has already exited
            print(f"{SHELL_NAME}: {args[0]}: {e.strerror}", file=sys.stderr)
        else:
            print(f"{SHELL_NAME}: {e.strerror or e}", file=sys.stderr)
        return None
    except ValueError as e:
        print(f"{SHELL_NAME}: {args[0]}: {e}", file=sys.stderr)
        return None

    # wait() only returns once the child has exited or been killed by a
    # signal; a stopped child keeps us waiting
    return proc.wait()


def launch(args):
    """
    Run an external command.
    The program's own exit status is not propagated: always CONTINUE.
    """
    spawn(args)
    return Status.CONTINUE

import signal
import sys

from microshell.builtin import find_builtin
from microshell.config import SHELL_NAME, PROMPT, EXIT_SUCCESS, EXIT_FAILURE
from microshell.executor import launch
from microshell.parser import split_line
from microshell.reader import init_readline, read_line
from microshell.status import Status


def execute(args):
    """
    Dispatch one tokenized command.
    Returns: Status of the builtin, or CONTINUE for empty and external commands
    """
    if not args:
        return Status.CONTINUE

    handler = find_builtin(args[0])
    if handler is not None:
        return handler(args)

    return launch(args)


def run_line(line):
    """Tokenize and dispatch a single input line"""
    return execute(split_line(line))


def fatal(message):
    print(f"{SHELL_NAME}: {message}", file=sys.stderr)
    sys.exit(EXIT_FAILURE)


def init_shell():
    """Startup hook: no config files are read, only terminal setup"""
    # Ctrl+C is not intercepted: leave SIGINT at the OS default
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    init_readline()


def shutdown_shell():
    """Shutdown hook: there are no shutdown commands to run"""
    sys.stdout.flush()


def main_loop():
    """
    Read, tokenize and dispatch lines until a command returns TERMINATE.
    End of input exits the process with status 0; a broken input stream
    exits with status 1.
    """
    status = Status.CONTINUE
    while status is Status.CONTINUE:
        try:
            line = read_line(PROMPT)
        except EOFError:
            sys.exit(EXIT_SUCCESS)
        except MemoryError:
            fatal("allocation error")
        except (OSError, ValueError) as e:
            fatal(f"read error: {e}")

        try:
            status = run_line(line)
        except MemoryError:
            fatal("allocation error")


def main():
    # Command-line arguments are ignored
    init_shell()
    try:
        main_loop()
    finally:
        shutdown_shell()
    sys.exit(EXIT_SUCCESS)

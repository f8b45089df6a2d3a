import os
import sys

from microshell.config import (
    SHELL_NAME,
    HELP_BANNER,
    HELP_USAGE,
    HELP_BUILTINS,
    HELP_FOOTER,
)
from microshell.status import Status


def builtin_cd(args):
    """Change directory to args[1]"""
    if len(args) < 2:
        print(f'{SHELL_NAME}: expected argument to "cd"', file=sys.stderr)
        return Status.CONTINUE
    try:
        os.chdir(args[1])
    except OSError as e:
        print(f"{SHELL_NAME}: {args[1]}: {e.strerror}", file=sys.stderr)
    except ValueError as e:
        print(f"{SHELL_NAME}: {args[1]}: {e}", file=sys.stderr)
    return Status.CONTINUE


def builtin_help(args):
    """Print help message"""
    print(HELP_BANNER)
    print(HELP_USAGE)
    print(HELP_BUILTINS)
    for name in builtin_names():
        print(f"  {name}")
    print(HELP_FOOTER)
    return Status.CONTINUE


def builtin_exit(args):
    # Arguments are ignored, the shell always exits with status 0
    return Status.TERMINATE


# Built once at import, never modified. Lookup order is declaration order.
BUILTINS = (
    ("cd", builtin_cd),
    ("help", builtin_help),
    ("exit", builtin_exit),
)


def builtin_names():
    return [name for name, _ in BUILTINS]


def find_builtin(name):
    """
    Look up a builtin by exact name.
    Returns: handler or None
    """
    for builtin_name, handler in BUILTINS:
        if builtin_name == name:
            return handler
    return None

import sys

import readline

from microshell.config import TOKEN_DELIMITERS


def init_readline():
    """Set up line editing for the prompt; a no-op unless stdin is a terminal"""
    if not sys.stdin.isatty():
        return

    try:
        # Word motion and completion stop at the same characters the
        # tokenizer splits on
        readline.set_completer_delims(TOKEN_DELIMITERS)

        for binding in (
            "\\e[A: previous-history",
            "\\e[B: next-history",
            "\\e[1;5D: backward-word",
            "\\e[1;5C: forward-word",
            "set editing-mode emacs",
        ):
            readline.parse_and_bind(binding)

    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


def read_line(prompt):
    """
    Print the prompt and read one line from stdin.
    Returns the line without its trailing newline.
    Raises EOFError at end of input; any other error from the stream
    is left to the caller.
    """
    return input(prompt)

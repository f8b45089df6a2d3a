import enum


class Status(enum.Enum):
    """Result of dispatching one command: keep looping or stop the shell."""

    CONTINUE = 1
    TERMINATE = 0

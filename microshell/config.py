SHELL_NAME = "microshell"

PROMPT = "> "

# Characters that separate tokens on a command line
TOKEN_DELIMITERS = " \t\r\n\a"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

HELP_BANNER = "MicroShell"
HELP_USAGE = "Type program names and arguments, and hit enter."
HELP_BUILTINS = "The following are built in:"
HELP_FOOTER = "Use the man command for information on other programs."

# Runs executables that have no #! line, as execvp does
FALLBACK_INTERPRETER = "/bin/sh"

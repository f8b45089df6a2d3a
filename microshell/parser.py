import shlex

from microshell.config import TOKEN_DELIMITERS


def split_line(line):
    """
    Split a command line into tokens.
    Only TOKEN_DELIMITERS separate tokens: quotes, backslashes and '#'
    are ordinary characters.
    Returns: list of tokens (empty for a blank line)
    """
    lex = shlex.shlex(line, posix=True)
    lex.whitespace = TOKEN_DELIMITERS
    lex.whitespace_split = True
    lex.commenters = ""
    lex.quotes = ""
    lex.escape = ""
    lex.escapedquotes = ""
    return list(lex)

r"""
pureargv tokens: classify one raw argument and expand it into names.

Shapes (checked in this order)
- SEPARATOR:  exactly "--"
- DASH:       exactly "-" (never a valid name)
- POSITIONAL: anything not starting with "-" (including "")
- LONG:       "--" followed by one or more characters, hyphens allowed ("--no-color", "---")
- SHORT:      "-" followed by exactly one non-hyphen character ("-x")
- CLUSTER:    "-" followed by two or more characters, the first not a hyphen ("-xyz")

Expansion
- names("--color") -> ("--color",)
- names("-x")      -> ("-x",)
- names("-xyz")    -> ("-x", "-y", "-z")
  Hyphens inside a cluster separate nothing and are skipped: names("-a-b") -> ("-a", "-b").
"""
from enum import StrEnum


class TokenKind(StrEnum):
    SEPARATOR = "separator"
    DASH = "dash"
    POSITIONAL = "positional"
    LONG = "long"
    SHORT = "short"
    CLUSTER = "cluster"


def classify(token, /):
    """
    Return the TokenKind of a raw argument.
    """
    if not isinstance(token, str):
        raise TypeError("classify() argument must be a string, not %s" % type(token).__name__)
    if token == "--":
        return TokenKind.SEPARATOR
    if token == "-":
        return TokenKind.DASH
    if not token.startswith("-"):
        return TokenKind.POSITIONAL
    if token.startswith("--"):
        return TokenKind.LONG
    if len(token) == 2:
        return TokenKind.SHORT
    return TokenKind.CLUSTER


def names(token, /):
    """
    Expand a flag/option token into the names to look up, in order.

    Raises
    - ValueError: the token is a separator, a lone dash or a positional
      argument, none of which name anything.
    """
    match classify(token):
        case TokenKind.LONG | TokenKind.SHORT:
            return (token,)
        case TokenKind.CLUSTER:
            return tuple("-" + char for char in token[1:] if char != "-")
        case kind:
            raise ValueError("%s token %r has no flag or option names" % (kind, token))


__all__ = (
    "TokenKind",
    "classify",
    "names",
)

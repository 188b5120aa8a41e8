"""
pureargv parsing: turn argument strings into a configuration value.

parseargs(spec, Pair(conf, args)) is the whole parser. It is pure: it does not
read sys.argv, does not print, does not mutate its inputs and does not raise
for bad user input. Bad user input comes back as Left(message).

Terminology, dissecting `cut -s -d : -f 1 -- file1 file2`:

    -s                     flag
    -d : -f 1              options (-d and -f are option names, ':' and '1' their values)
    --                     separator
    file1 file2            positional arguments

Rules
- arguments are read left to right.
- "--" ends processing; everything after it is positional, untouched.
- the first argument not starting with "-" ends processing; it and everything
  after it are positional.
- "-" on its own is an error.
- "-xyz" is read as "-x", "-y", "-z", in that order.
- a flag applies its setter to the configuration.
- an option takes the next argument, whatever it looks like, and hands it to
  its validator, which either rejects it (Left) or returns a setter (Right).
- the first error ends processing.

Example
    >>> color = Flag(lambda conf: {**conf, "color": True})
    >>> @Option
    ... def email(value):
    ...     if "@" not in value:
    ...         return Left("%s is not a valid email address" % json.dumps(value))
    ...     return Right(lambda conf: {**conf, "email": value})
    ...
    >>> spec = {"-c": color, "--color": color, "-e": email, "--email": email}
    >>> parseargs(spec, Pair({"color": False, "email": None}, ["-ce", "mail@example.org", "x"]))
    Right(Pair(fst={'color': True, 'email': 'mail@example.org'}, snd=['x']))
    >>> parseargs(spec, Pair({"color": False, "email": None}, ["--email"]))
    Left('--email requires a value')
"""
from collections.abc import Mapping, Sequence

from .faults import invalid, unrecognized, unvalued
from .handlers import Handler, HandlerKind
from .results import Left, Right, Pair
from .tokens import TokenKind, classify, names


def parseargs(spec, pair, /):
    """
    Parse `args` against `spec`, starting from `conf`.

    Parameters
    - spec: Mapping[str, Handler]
      names ("-c", "--color", ...) to handlers. Only looked up, never iterated.
    - pair: Pair(conf, args) or any (conf, args) 2-sequence
      the default configuration and the argument strings.

    Returns
    - Right(Pair(conf, positionals)): the final configuration and the
      positional arguments as a new list.
    - Left(message): the first failure, one of
      "- is not a valid flag or option name",
      "<name> is unrecognized",
      "<name> requires a value",
      or a validator's own Left, returned as it is.

    Raises
    - TypeError: for caller mistakes rather than user input: a spec that is
      not a mapping, malformed pair, args given as a bare string, a non-string
      argument (option values included), a spec entry that is not a Handler,
      or a validator returning something other than Left/Right.
    """
    if not isinstance(spec, Mapping):
        raise TypeError("parseargs() first argument must be a mapping, not %s" % type(spec).__name__)
    try:
        conf, args = pair
    except (TypeError, ValueError):
        raise TypeError("parseargs() second argument must be a (conf, args) pair") from None
    if isinstance(args, str) or not isinstance(args, Sequence):
        raise TypeError("parseargs() args must be a sequence of strings, not %s" % type(args).__name__)

    index = 0
    while index < len(args):
        match classify(token := args[index]):
            case TokenKind.DASH:
                return Left(invalid())
            case TokenKind.SEPARATOR:
                return Right(Pair(conf, list(args[index + 1:])))
            case TokenKind.POSITIONAL:
                return Right(Pair(conf, list(args[index:])))

        for name in names(token):
            if name not in spec:
                return Left(unrecognized(name))
            match spec[name]:
                case Handler(HandlerKind.FLAG, setter):
                    conf = setter(conf)
                case Handler(HandlerKind.OPTION, validator):
                    # The value is the next whole argument, never classified.
                    index += 1
                    if index == len(args):
                        return Left(unvalued(name))
                    if not isinstance(value := args[index], str):
                        raise TypeError("value of %s must be a string, not %s" % (name, type(value).__name__))
                    match validator(value):
                        case Left() as left:
                            return left
                        case Right(setter):
                            conf = setter(conf)
                        case other:
                            raise TypeError("validator of %s must return Left or Right, not %s" % (name, type(other).__name__))
                case other:
                    raise TypeError("spec entry %r must be a Handler, not %s" % (name, type(other).__name__))
        index += 1

    return Right(Pair(conf, []))


__all__ = (
    "parseargs",
)

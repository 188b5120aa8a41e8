"""
pureargv handlers: what a flag or option name does when it is met.

Overview
- Handler: a tagged union with exactly two variants.
  • flag: holds a setter (conf -> conf). The name stands alone.
  • option: holds a validator (str -> Left[str] | Right[setter]). The name
    takes the next argument as its value.
- Flag(setter) / Option(validator): the constructors callers use. Both work
  as decorators.
- Setter / Validator: type aliases for annotations.

Dispatch reads the explicit tag, never the type of the wrapped function:

    match handler:
        case Handler(HandlerKind.FLAG, setter): ...
        case Handler(HandlerKind.OPTION, validator): ...

A specification is any mapping from name to Handler. Several names may share
one Handler:

    >>> color = Flag(lambda conf: {**conf, "color": True})
    >>> spec = {"-c": color, "--color": color, "--colour": color}
"""
from collections.abc import Callable
from enum import StrEnum
from typing import final

from .results import Either


type Setter[_C] = Callable[[_C], _C]
type Validator[_C] = Callable[[str], Either]


class HandlerKind(StrEnum):
    """
    the two handler variants.
    """
    FLAG = "flag"
    OPTION = "option"


@final
class Handler:
    """
    Immutable, tagged wrapper around a setter or a validator.

    Prefer the Flag/Option constructors; Handler(tag, function) is exposed for
    pattern matching and for callers building handlers from data.

    Raises
    - ValueError: the tag is not one of HandlerKind.
    - TypeError: the function is not callable.
    """
    __slots__ = ("_tag", "_function")
    __match_args__ = ("tag", "function")

    def __new__(cls, tag, function, /):
        try:
            tag = HandlerKind(tag)
        except ValueError:
            raise ValueError("handler tag must be 'flag' or 'option', not %r" % (tag,)) from None
        if not callable(function):
            raise TypeError("%s handler must wrap a callable" % tag)
        self = super().__new__(cls)
        object.__setattr__(self, "_tag", tag)
        object.__setattr__(self, "_function", function)
        return self

    @property
    def tag(self):
        return self._tag

    @property
    def function(self):
        return self._function

    @property
    def isflag(self):
        return self._tag is HandlerKind.FLAG

    @property
    def isoption(self):
        return self._tag is HandlerKind.OPTION

    def __setattr__(self, name, value, /):
        raise AttributeError("Handler is immutable")

    def __delattr__(self, name, /):
        raise AttributeError("Handler is immutable")

    def __repr__(self):
        return "%s(%r)" % (self._tag.title(), self._function)

    def __rich_repr__(self):
        yield "tag", str(self._tag)
        yield "function", self._function

    def __reduce__(self):
        return Handler, (str(self._tag), self._function)


def Flag(setter, /):
    """
    Wrap a setter as a handler that stands alone.

    When its name is met, `setter` is applied to the current configuration
    and the result becomes the next configuration. No argument is consumed.
    """
    if not callable(setter):
        raise TypeError("Flag() argument must be callable")
    return Handler(HandlerKind.FLAG, setter)


def Option(validator, /):
    """
    Wrap a validator as a handler that takes a value.

    When its name is met, the next argument (whatever it looks like) is
    passed to `validator`, which answers Left(message) to reject it or
    Right(setter) to accept it.
    """
    if not callable(validator):
        raise TypeError("Option() argument must be callable")
    return Handler(HandlerKind.OPTION, validator)


__all__ = (
    "Setter",
    "Validator",
    "HandlerKind",
    "Handler",
    "Flag",
    "Option",
)

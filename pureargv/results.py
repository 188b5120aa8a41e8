"""
pureargv results: the two-outcome value returned by validators and parseargs.

Overview
- Left(value): the failure branch. parseargs and validators put a
  user-facing message string here.
- Right(value): the success branch. Validators put a setter here; parseargs
  puts a Pair(conf, positionals).
- Pair(fst, snd): immutable two-field record (a named tuple, so it unpacks).

Failures are data, not exceptions: callers branch with `match`, `isleft`,
or `either(...)`. `unwrap()` exists for callers who prefer exceptions at the
edge of their program; it raises ArgumentFault on a Left.

Quick example
    >>> match parseargs(spec, Pair(conf, args)):
    ...     case Left(message):
    ...         ...
    ...     case Right(Pair(conf, positionals)):
    ...         ...
"""
from typing import Any, NamedTuple, final

from .faults import ArgumentFault, diagnose


class Pair(NamedTuple):
    """
    Immutable pair of values.

    parseargs takes Pair(default_conf, args) and answers with
    Right(Pair(final_conf, positionals)).
    """
    fst: Any
    snd: Any


class Either:
    """
    Shared behavior of Left and Right.

    Instances are immutable and compare by branch and payload. Only the two
    sealed subclasses can be instantiated.
    """
    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __new__(cls, value, /):
        if cls is Either:
            raise TypeError("Either cannot be instantiated directly, use Left or Right")
        self = super().__new__(cls)
        object.__setattr__(self, "_value", value)
        return self

    @property
    def value(self):
        return self._value

    @property
    def isleft(self):
        return isinstance(self, Left)

    @property
    def isright(self):
        return isinstance(self, Right)

    def either(self, on_left, on_right, /):
        """
        Fold both branches into one value: on_left(value) for a Left,
        on_right(value) for a Right.
        """
        return on_left(self._value) if self.isleft else on_right(self._value)

    def map(self, function, /):
        """
        Apply `function` to the payload of a Right; a Left passes through.
        """
        return Right(function(self._value)) if self.isright else self

    def chain(self, function, /):
        """
        Apply a result-returning `function` to the payload of a Right; a Left
        passes through.
        """
        if self.isleft:
            return self
        if not isinstance(result := function(self._value), Either):
            raise TypeError("chain() function must return Left or Right, not %s" % type(result).__name__)
        return result

    def unwrap(self):
        """
        Return the payload of a Right, or raise ArgumentFault for a Left.

        The fault carries the Left message and the fault code it maps to.
        """
        if self.isright:
            return self._value
        raise ArgumentFault(str(self._value), code=diagnose(str(self._value)))

    def __setattr__(self, name, value, /):
        raise AttributeError("%s is immutable" % type(self).__name__)

    def __delattr__(self, name, /):
        raise AttributeError("%s is immutable" % type(self).__name__)

    def __eq__(self, other, /):
        if not isinstance(other, Either):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self._value)

    def __rich_repr__(self):
        # Wrapped so a tuple payload (a Pair) is not read as a name/value item.
        yield (self._value,)

    def __reduce__(self):
        return type(self), (self._value,)


@final
class Left(Either):
    """
    Failure branch. Holds an error message when produced by pureargv.
    """
    __slots__ = ()


@final
class Right(Either):
    """
    Success branch. Holds a setter (validators) or a Pair (parseargs).
    """
    __slots__ = ()


__all__ = (
    "Either",
    "Left",
    "Right",
    "Pair",
)

"""
pureargv faults: message wording, fault codes and rendering.

Scope
- FaultCode: stable numeric identifiers for the four ways a parse can fail.
- invalid()/unrecognized()/unvalued(): the single source of the fixed,
  reproducible message wording that parseargs puts in a Left.
- diagnose(): map a Left message back to its FaultCode.
- ArgumentFault: an exception that carries a message plus options and knows
  how to render itself through rich.
- trigger(): surface a fault either by raising it or by printing it and exiting.

The parser itself never raises these and never prints; it returns messages as
data. This module is for the caller's edge of the program, where a Left has
to become a user-visible report:

    match parseargs(spec, Pair(conf, sys.argv[1:])):
        case Left(message):
            trigger(ArgumentFault(message, code=diagnose(message)), shell=True)

Configuration (read from __main__, like the host application's globals)
- __prog__: program name shown in the header.
- __styles__: mapping of style overrides (see ArgumentFault.__rich__).
- __codes__: mapping of FaultCode to a custom label.
"""
import copy
import os.path
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, coalesce

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes for parse failures (stable identifiers).

    - INVALID_NAME: a lone "-" where a flag or option name was expected.
    - UNRECOGNIZED_NAME: a name with no entry in the specification.
    - VALUE_REQUIRED: an option name with no argument left to use as its value.
    - REJECTED_VALUE: an option validator refused its value (message is the validator's).
    """
    INVALID_NAME      = 21101
    UNRECOGNIZED_NAME = 21102
    VALUE_REQUIRED    = 21103
    REJECTED_VALUE    = 21104

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


_titles = MappingProxyType({
    FaultCode.INVALID_NAME: "invalid name",
    FaultCode.UNRECOGNIZED_NAME: "unrecognized name",
    FaultCode.VALUE_REQUIRED: "missing value",
    FaultCode.REJECTED_VALUE: "invalid value",
})

_hints = MappingProxyType({
    FaultCode.INVALID_NAME: "use '--' to end options, or pass '-' as an option value",
    FaultCode.UNRECOGNIZED_NAME: "check the spelling, or put '--' before arguments that start with '-'",
    FaultCode.VALUE_REQUIRED: "pass the value as the next argument",
    FaultCode.REJECTED_VALUE: "pass a different value",
})


def invalid():
    return "- is not a valid flag or option name"


def unrecognized(name, /):
    return "%s is unrecognized" % name


def unvalued(name, /):
    return "%s requires a value" % name


def diagnose(message, /):
    """
    best-effort mapping of a Left message to the FaultCode that produced it.

    anything that is not one of the parser's own wordings is attributed to a
    validator (REJECTED_VALUE).
    """
    if not isinstance(message, str):
        raise TypeError("diagnose() argument must be a string")
    if message == invalid():
        return FaultCode.INVALID_NAME
    # names may contain spaces, so match on the fixed suffix.
    for code, build in (
        (FaultCode.UNRECOGNIZED_NAME, unrecognized),
        (FaultCode.VALUE_REQUIRED, unvalued),
    ):
        suffix = build("")
        if message.endswith(suffix) and message.removesuffix(suffix).startswith("-"):
            return code
    return FaultCode.REJECTED_VALUE


class ArgumentFault(Exception):
    """
    a parse failure, ready to be reported.

    options (all optional)
    - code: FaultCode (defaults to diagnose(message))
    - title / hint: header title and hint line (default per code)
    - prog: program name (overridden by __main__.__prog__)
    - shell: when true, trigger() prints and exits instead of raising
    - colorful / fancy: rich styling and panel chrome
    - status: exit status used in shell mode (default 1)
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(coalesce(message, ""))
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code", diagnose(coalesce(self.message, "")))

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", False)
        fancy = self.options.get("fancy", False)

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            return Text(str(fragment), styles[style])

        code = self.code
        prog = getattr(main, "__prog__", self.options.get("prog", os.path.basename(sys.argv[0]) or "pureargv"))

        header = Text.assemble(
            "[ ",
            text(prog, "prog-name"),
            " — ",
            text(code.normalize(), "code"),
            " | ",
            text(self.options.get("title", _titles[code]).title(), "error-title"),
            " ]"
        )
        message = text(self.message, "error-message")
        hint = Text.assemble(text(" → ", "hint-arrow"), text(self.options.get("hint", _hints[code]), "hint"))

        if fancy:
            return Panel(Group(message, hint), title=header, title_align="left", width=console.width - 4)

        return Group(header, message, hint)

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(self.options.get("status", 1))

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods.
    - options are merged into the fault via copy.replace() before triggering.
    - in shell mode the fault is rendered on stderr and the process exits;
      otherwise the fault is raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "FaultCode",
    "ArgumentFault",
    "invalid",
    "unrecognized",
    "unvalued",
    "diagnose",
    "trigger",
)

"""
Faults module behavioral tests (wording, codes, rendering, trigger).

Scope
- Validate the fixed message wording used by parseargs.
- Validate diagnose() mapping from messages to fault codes.
- Validate ArgumentFault options, replacement and rich rendering.
- Validate trigger() in raising and shell modes.

Conventions
- Test method names follow CamelCase per project convention.
- Rendering is captured from a colorless console for deterministic output.
"""

from __future__ import annotations

import copy
import io
import unittest
from unittest import TestCase
from unittest.mock import patch

from rich.console import Console

from pureargv import (
    ArgumentFault,
    FaultCode,
    Left,
    Pair,
    diagnose,
    invalid,
    parseargs,
    trigger,
    unrecognized,
    unvalued,
)


def render(fault):
    console = Console(color_system=None, force_terminal=False, width=120)
    with console.capture() as capture:
        console.print(fault)
    return capture.get()


class TestWording(TestCase):
    """Message builders are the parser's wording."""

    def testInvalid(self):
        self.assertEqual(invalid(), "- is not a valid flag or option name")

    def testUnrecognized(self):
        self.assertEqual(unrecognized("--foo"), "--foo is unrecognized")
        self.assertEqual(unrecognized("-x"), "-x is unrecognized")

    def testUnvalued(self):
        self.assertEqual(unvalued("--email"), "--email requires a value")

    def testParserUsesWording(self):
        self.assertEqual(parseargs({}, Pair(None, ["-"])), Left(invalid()))
        self.assertEqual(parseargs({}, Pair(None, ["-q"])), Left(unrecognized("-q")))


class TestDiagnose(TestCase):
    """Behavioral tests for diagnose()."""

    def testParserMessages(self):
        self.assertIs(diagnose(invalid()), FaultCode.INVALID_NAME)
        self.assertIs(diagnose(unrecognized("--foo")), FaultCode.UNRECOGNIZED_NAME)
        self.assertIs(diagnose(unrecognized("---")), FaultCode.UNRECOGNIZED_NAME)
        self.assertIs(diagnose(unvalued("-e")), FaultCode.VALUE_REQUIRED)

    def testNamesWithSpaces(self):
        self.assertIs(diagnose(unrecognized("--a b")), FaultCode.UNRECOGNIZED_NAME)
        self.assertIs(diagnose(unvalued("--a b")), FaultCode.VALUE_REQUIRED)
        self.assertEqual(parseargs({}, Pair(None, ["--a b"])), Left("--a b is unrecognized"))
        self.assertIs(diagnose(parseargs({}, Pair(None, ["--a b"])).value), FaultCode.UNRECOGNIZED_NAME)

    def testValidatorMessages(self):
        self.assertIs(diagnose('"xxx" is not a valid email address'), FaultCode.REJECTED_VALUE)
        self.assertIs(diagnose(""), FaultCode.REJECTED_VALUE)
        self.assertIs(diagnose("value is unrecognized"), FaultCode.REJECTED_VALUE)

    def testNonStringRejected(self):
        with self.assertRaises(TypeError):
            diagnose(None)


class TestFaultCode(TestCase):
    """Behavioral tests for FaultCode."""

    def testStableValues(self):
        self.assertEqual(FaultCode.INVALID_NAME, 21101)
        self.assertEqual(FaultCode.UNRECOGNIZED_NAME, 21102)
        self.assertEqual(FaultCode.VALUE_REQUIRED, 21103)
        self.assertEqual(FaultCode.REJECTED_VALUE, 21104)

    def testNormalizeDefaultsToNumber(self):
        self.assertEqual(FaultCode.VALUE_REQUIRED.normalize(), "21103")

    def testNormalizeHonorsHostCodes(self):
        main = __import__("__main__")
        with patch.object(main, "__codes__", {FaultCode.VALUE_REQUIRED: "E-VALUE"}, create=True):
            self.assertEqual(FaultCode.VALUE_REQUIRED.normalize(), "E-VALUE")


class TestArgumentFault(TestCase):
    """Behavioral tests for ArgumentFault."""

    def testMessageAndOptions(self):
        fault = ArgumentFault("--foo is unrecognized", prog="tool")
        self.assertEqual(fault.message, "--foo is unrecognized")
        self.assertEqual(str(fault), "--foo is unrecognized")
        self.assertEqual(fault.options["prog"], "tool")
        with self.assertRaises(TypeError):
            fault.options["prog"] = "other"

    def testCodeDefaultsToDiagnosis(self):
        self.assertIs(ArgumentFault("-e requires a value").code, FaultCode.VALUE_REQUIRED)
        self.assertIs(ArgumentFault("whatever", code=FaultCode.INVALID_NAME).code, FaultCode.INVALID_NAME)

    def testReplaceMergesOptions(self):
        fault = ArgumentFault("-e requires a value", prog="tool", shell=False)
        replaced = copy.replace(fault, shell=True)
        self.assertIsNot(replaced, fault)
        self.assertEqual(replaced.message, fault.message)
        self.assertEqual(dict(replaced.options), {"prog": "tool", "shell": True})
        self.assertEqual(dict(fault.options), {"prog": "tool", "shell": False})

    def testRenderPlain(self):
        output = render(ArgumentFault("--foo is unrecognized", prog="tool"))
        self.assertIn("[ tool — 21102 | Unrecognized Name ]", output)
        self.assertIn("--foo is unrecognized", output)
        self.assertIn("→", output)

    def testRenderCustomTitleAndHint(self):
        output = render(ArgumentFault("bad", prog="tool", title="odd value", hint="try again"))
        self.assertIn("Odd Value", output)
        self.assertIn("try again", output)

    def testRenderFancy(self):
        output = render(ArgumentFault("-e requires a value", prog="tool", fancy=True))
        self.assertIn("tool", output)
        self.assertIn("-e requires a value", output)

    def testRenderHonorsHostProgram(self):
        main = __import__("__main__")
        with patch.object(main, "__prog__", "hosted", create=True):
            output = render(ArgumentFault("-", prog="tool"))
        self.assertIn("hosted", output)


class TestTrigger(TestCase):
    """Behavioral tests for trigger()."""

    def testRaisesOutsideShell(self):
        with self.assertRaises(ArgumentFault) as context:
            trigger(ArgumentFault("--foo is unrecognized"))
        self.assertEqual(context.exception.message, "--foo is unrecognized")

    def testShellPrintsAndExits(self):
        stream = io.StringIO()
        console = Console(file=stream, color_system=None, force_terminal=False, width=120)
        with patch("pureargv.faults.console", console):
            with self.assertRaises(SystemExit) as context:
                trigger(ArgumentFault("--foo is unrecognized", prog="tool"), shell=True, status=2)
        self.assertEqual(context.exception.code, 2)
        self.assertIn("--foo is unrecognized", stream.getvalue())

    def testRequiresTriggerProtocol(self):
        with self.assertRaises(TypeError):
            trigger(ValueError("nope"))


if __name__ == '__main__':
    unittest.main()

"""
Tokens module behavioral tests (classify, names).

Scope
- Validate the shape of every token kind, including the borderline ones
  ("---", "", "-x-").
- Validate cluster expansion order and hyphen skipping.
- Validate rejection of tokens that name nothing.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from pureargv.tokens import TokenKind, classify, names


class TestClassify(TestCase):
    """Behavioral tests for classify()."""

    def testSeparator(self):
        self.assertIs(classify("--"), TokenKind.SEPARATOR)

    def testDash(self):
        self.assertIs(classify("-"), TokenKind.DASH)

    def testPositional(self):
        for token in ("foo", "", "x-y", "1", " -c", "+c"):
            with self.subTest(token=token):
                self.assertIs(classify(token), TokenKind.POSITIONAL)

    def testLong(self):
        for token in ("--color", "--no-color", "---", "--x", "--a=b", "-- "):
            with self.subTest(token=token):
                self.assertIs(classify(token), TokenKind.LONG)

    def testShort(self):
        for token in ("-c", "-X", "-0", "-é", "- "):
            with self.subTest(token=token):
                self.assertIs(classify(token), TokenKind.SHORT)

    def testCluster(self):
        for token in ("-xyz", "-ce", "-c-", "-a-b"):
            with self.subTest(token=token):
                self.assertIs(classify(token), TokenKind.CLUSTER)

    def testNonStringRejected(self):
        with self.assertRaises(TypeError):
            classify(None)
        with self.assertRaises(TypeError):
            classify(b"--color")


class TestNames(TestCase):
    """Behavioral tests for names()."""

    def testLongNameIsKeptWhole(self):
        self.assertEqual(names("--color"), ("--color",))
        self.assertEqual(names("--no-color"), ("--no-color",))
        self.assertEqual(names("---"), ("---",))

    def testShortNameIsKeptWhole(self):
        self.assertEqual(names("-c"), ("-c",))

    def testClusterExpandsInOrder(self):
        self.assertEqual(names("-xyz"), ("-x", "-y", "-z"))
        self.assertEqual(names("-zyx"), ("-z", "-y", "-x"))

    def testClusterKeepsRepeats(self):
        self.assertEqual(names("-vvv"), ("-v", "-v", "-v"))

    def testClusterSkipsHyphens(self):
        self.assertEqual(names("-a-b"), ("-a", "-b"))
        self.assertEqual(names("-a--b-"), ("-a", "-b"))

    def testTokensWithoutNamesRejected(self):
        for token in ("--", "-", "foo", ""):
            with self.subTest(token=token):
                with self.assertRaises(ValueError):
                    names(token)


if __name__ == '__main__':
    unittest.main()

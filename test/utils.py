# python
"""
Utility behavioral tests (sentinel, mirror, ordinal, token shapes).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argline.utils import Unset, UnsetType, coalesce, isargument, isflag, mirror, ordinal, rename


class TestUnset(TestCase):
    """Behavioral tests for the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsey(self):
        self.assertFalse(Unset)

    def testUnionCheck(self):
        self.assertIsInstance(Unset, str | Unset)

    def testSealed(self):
        with self.assertRaises(TypeError):
            type("Subclass", (UnsetType,), {})

    def testCoalesceKeepsNone(self):
        self.assertIsNone(coalesce(None, "x"))
        self.assertEqual(coalesce(Unset, "x"), "x")


class TestMirror(TestCase):
    """Behavioral tests for mirror() and rename()."""

    def testListComesBackAsTuple(self):
        class Node:
            values = mirror("values")

            def __init__(self):
                self._values = ["a", ["b"]]

        self.assertEqual(Node().values, ("a", ("b",)))

    def testRenameDecorator(self):
        @rename("generated")
        def function():
            pass

        self.assertEqual(function.__name__, "generated")
        self.assertEqual(function.__qualname__, "generated")


class TestShapes(TestCase):
    """Behavioral tests for ordinal() and token shapes."""

    def testOrdinals(self):
        self.assertEqual(ordinal(1), "first")
        self.assertEqual(ordinal(10), "tenth")
        self.assertEqual(ordinal(11), "11th")
        self.assertEqual(ordinal(22), "22nd")
        self.assertEqual(ordinal(113), "113th")

    def testArgumentShape(self):
        self.assertTrue(isargument("--output"))
        self.assertFalse(isargument("--"))
        self.assertFalse(isargument("-o"))

    def testFlagShape(self):
        self.assertTrue(isflag("-v"))
        self.assertTrue(isflag("-vf"))
        self.assertFalse(isflag("-"))
        self.assertFalse(isflag("--verbose"))
        self.assertFalse(isflag("push"))


if __name__ == "__main__":
    unittest.main()

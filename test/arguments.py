# python
"""
Arguments module behavioral tests (leaf nodes, no engine).

Scope
- Validate Flag, Option and Operand construction: name shapes, duplicates, kinds.
- Validate process(): occurrence bookkeeping, value consumption, duplicates.
- Validate misspelling suggestions and both validation sweeps on single nodes.

Conventions
- Test method names follow CamelCase per project convention.
- Nodes are driven through a bare Context; engine behavior lives in test/cmdline.py.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argline import (
    Argument,
    Context,
    DuplicatedArgumentError,
    Flag,
    Kind,
    MissingValueError,
    Operand,
    Option,
    RedefinitionError,
    RequiredArgumentMissingError,
)


class TestNames(TestCase):
    """Behavioral tests for name sanitization."""

    def testFlagKeepsDeclarationOrder(self):
        verbose = Flag("-v", "--verbose")
        self.assertEqual(verbose.names, ("-v", "--verbose"))
        self.assertEqual(verbose.name, "-v")

    def testNamesAreStripped(self):
        self.assertEqual(Flag("  --verbose ").name, "--verbose")

    def testNoNamesRejected(self):
        with self.assertRaises(TypeError):
            Flag()

    def testNonStringNameRejected(self):
        with self.assertRaises(TypeError):
            Option(1)

    def testEmptyNameRejected(self):
        with self.assertRaises(ValueError):
            Flag("   ")

    def testDashlessSwitchRejected(self):
        with self.assertRaises(ValueError):
            Flag("verbose")

    def testLongShortSwitchRejected(self):
        with self.assertRaises(ValueError):
            Flag("-vv")

    def testEqualsInNameRejected(self):
        with self.assertRaises(ValueError):
            Option("--out=put")

    def testDuplicateNamesRejected(self):
        with self.assertRaises(ValueError):
            Flag("--verbose", "--verbose")

    def testOperandRejectsDashes(self):
        with self.assertRaises(ValueError):
            Operand("--add")

    def testOperandAcceptsInnerHyphen(self):
        self.assertEqual(Operand("dry-run").name, "dry-run")

    def testAbstractArgumentRejected(self):
        with self.assertRaises(TypeError):
            Argument(("--name",))


class TestKinds(TestCase):
    """Behavioral tests for kind tags and value-bearing flags."""

    def testFlagKind(self):
        flag = Flag("-v")
        self.assertIs(flag.kind, Kind.FLAG)
        self.assertFalse(flag.valued)

    def testOptionKind(self):
        option = Option("-o")
        self.assertIs(option.kind, Kind.NAMED)
        self.assertTrue(option.valued)

    def testOperandValuedOnRequest(self):
        self.assertFalse(Operand("add").valued)
        self.assertTrue(Operand("add", valued=True).valued)

    def testRepresentation(self):
        self.assertTrue(repr(Flag("-v", "--verbose")).startswith("flag(names=('-v', '--verbose')"))


class TestProcess(TestCase):
    """Behavioral tests for process() and bookkeeping."""

    def testFlagProcessMarksDefined(self):
        flag = Flag("-v")
        flag.process(Context())
        self.assertTrue(flag.defined)
        self.assertTrue(flag.value)
        self.assertEqual(flag.count, 1)

    def testFlagDefaultsToFalse(self):
        self.assertFalse(Flag("-v").value)

    def testSecondOccurrenceRaises(self):
        flag = Flag("-v")
        context = Context()
        flag.process(context)
        with self.assertRaises(DuplicatedArgumentError):
            flag.process(context)

    def testMultipleCountsOccurrences(self):
        flag = Flag("-v", multiple=True)
        context = Context()
        for _ in range(3):
            flag.process(context)
        self.assertEqual(flag.count, 3)

    def testOptionConsumesNextToken(self):
        option = Option("-o")
        context = Context(["a.txt", "rest"])
        option.process(context)
        self.assertEqual(option.value, "a.txt")
        self.assertEqual(context.next(), "rest")

    def testOptionDefaultWhenAbsent(self):
        self.assertEqual(Option("-o", default="a.out").value, "a.out")

    def testMultipleOptionCollectsValues(self):
        option = Option("-I", multiple=True)
        context = Context(["a", "b"])
        option.process(context)
        option.process(context)
        self.assertEqual(option.values, ("a", "b"))
        self.assertEqual(option.value, "b")

    def testOptionAtEndRaisesMissingValue(self):
        with self.assertRaises(MissingValueError):
            Option("-o").process(Context())

    def testOptionRejectsArgumentShapedValue(self):
        with self.assertRaises(MissingValueError):
            Option("-o").process(Context(["--verbose"]))

    def testValuedOperandConsumesValue(self):
        operand = Operand("add", valued=True)
        operand.process(Context(["file.txt"]))
        self.assertEqual(operand.value, "file.txt")

    def testClearResetsBookkeeping(self):
        option = Option("-o")
        option.process(Context(["a"]))
        option.clear()
        self.assertFalse(option.defined)
        self.assertEqual(option.count, 0)
        self.assertEqual(option.values, ())
        self.assertIsNone(option.value)


class TestMisspelled(TestCase):
    """Behavioral tests for is_misspelled()."""

    def testMatchingNameAppended(self):
        suggestions = []
        self.assertTrue(Option("-o", "--output").is_misspelled("--outptu", suggestions))
        self.assertEqual(suggestions, ["--output"])

    def testNoDuplicateSuggestions(self):
        suggestions = ["--output"]
        Option("--output").is_misspelled("--outptu", suggestions)
        self.assertEqual(suggestions, ["--output"])

    def testUnrelatedCandidate(self):
        suggestions = []
        self.assertFalse(Flag("--verbose").is_misspelled("--zzzzzzzz", suggestions))
        self.assertEqual(suggestions, [])


class TestValidation(TestCase):
    """Behavioral tests for check_before() and check_after()."""

    def testNamesSortedIntoBuckets(self):
        flags, names = set(), set()
        Flag("-v", "--verbose").check_before(flags, names)
        self.assertEqual(flags, {"-v"})
        self.assertEqual(names, {"--verbose"})

    def testCollisionRaisesRedefinition(self):
        flags, names = set(), set()
        Flag("-v").check_before(flags, names)
        with self.assertRaises(RedefinitionError):
            Option("-v", "--value").check_before(flags, names)

    def testRequiredMissingRaises(self):
        with self.assertRaises(RequiredArgumentMissingError):
            Option("--output", required=True).check_after()

    def testRequiredPresentPasses(self):
        option = Option("--output", required=True)
        option.process(Context(["x"]))
        option.check_after()

    def testOptionalMissingPasses(self):
        Flag("-v").check_after()


if __name__ == "__main__":
    unittest.main()

# python
"""
Command node behavioral tests.

Scope
- Validate Command construction, child registration and scoped lookup.
- Validate that only invoked commands are validated and suggested in depth.

Conventions
- Test method names follow CamelCase per project convention.
- Commands are exercised standalone here; full parses live in test/cmdline.py.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argline import (
    Command,
    Context,
    Flag,
    Kind,
    MissingCommandError,
    MultipleCommandsError,
    Option,
    RedefinitionError,
    RequiredArgumentMissingError,
)


class TestCommandConstruction(TestCase):
    """Behavioral tests for Command construction."""

    def testKindIsCommand(self):
        self.assertIs(Command("push").kind, Kind.COMMAND)

    def testDashedNameRejected(self):
        with self.assertRaises(ValueError):
            Command("--push")

    def testValuedCommand(self):
        checkout = Command("checkout", valued=True, default="main")
        self.assertTrue(checkout.valued)
        self.assertEqual(checkout.value, "main")

    def testAddArgumentReturnsChildAndAttaches(self):
        push = Command("push")
        force = push.add_argument(Flag("-f", "--force"))
        self.assertIs(force.parent, push)
        self.assertEqual(push.arguments, (force,))

    def testSiblingNameClashRejected(self):
        push = Command("push")
        push.add_argument(Flag("-f", "--force"))
        with self.assertRaises(RedefinitionError):
            push.add_argument(Option("--force"))


class TestCommandLookup(TestCase):
    """Behavioral tests for find() and find_child()."""

    def setUp(self):
        self.remote = Command("remote")
        self.verbose = self.remote.add_argument(Flag("-v"))
        self.add = self.remote.add_argument(Command("add"))
        self.label = self.add.add_argument(Option("--name"))

    def testFindOwnName(self):
        self.assertIs(self.remote.find("remote"), self.remote)

    def testFindSearchesWholeSubtree(self):
        self.assertIs(self.remote.find("--name"), self.label)

    def testFindChildMatchesSubCommandByName(self):
        self.assertIs(self.remote.find_child("add"), self.add)

    def testFindChildHidesInactiveSubCommandChildren(self):
        self.assertIsNone(self.remote.find_child("--name"))

    def testFindChildSeesActiveSubCommandChildren(self):
        self.remote._activate(self.add, Context())
        self.assertIs(self.remote.find_child("--name"), self.label)

    def testSecondSubCommandRaises(self):
        remove = self.remote.add_argument(Command("remove"))
        self.remote._activate(self.add, Context())
        with self.assertRaises(MultipleCommandsError):
            self.remote._activate(remove, Context())


class TestCommandMisspelled(TestCase):
    """Behavioral tests for suggestion sweeps."""

    def testCommandOnlyChecksOwnName(self):
        push = Command("push")
        push.add_argument(Flag("--force"))
        suggestions = []
        self.assertFalse(push.is_misspelled_command("--forec", suggestions))
        self.assertTrue(push.is_misspelled_command("psuh", suggestions))
        self.assertEqual(suggestions, ["push"])

    def testFullSweepIncludesChildren(self):
        push = Command("push")
        push.add_argument(Flag("--force"))
        suggestions = []
        self.assertTrue(push.is_misspelled("--forec", suggestions))
        self.assertEqual(suggestions, ["--force"])


class TestCommandValidation(TestCase):
    """Behavioral tests for check_before() and check_after()."""

    def testChildrenDoNotLeakIntoEnclosingNamespace(self):
        flags, names = set(), set()
        push = Command("push")
        push.add_argument(Flag("--force"))
        push.check_before(flags, names)
        self.assertEqual(names, {"push"})

    def testChildShadowingEnclosingNameRaises(self):
        flags, names = set(), {"--force"}
        push = Command("push")
        push.add_argument(Flag("--force"))
        with self.assertRaises(RedefinitionError):
            push.check_before(flags, names)

    def testInactiveCommandSkipsChildren(self):
        push = Command("push")
        push.add_argument(Flag("--force", required=True))
        push.check_after()

    def testInvokedCommandChecksChildren(self):
        push = Command("push")
        push.add_argument(Flag("--force", required=True))
        push.process(Context())
        with self.assertRaises(RequiredArgumentMissingError):
            push.check_after()

    def testInvokedCommandRequiresSubCommand(self):
        remote = Command("remote", command_required=True)
        remote.add_argument(Command("add"))
        remote.process(Context())
        with self.assertRaises(MissingCommandError):
            remote.check_after()

    def testClearDeactivatesSubCommand(self):
        remote = Command("remote")
        add = remote.add_argument(Command("add"))
        remote._activate(add, Context())
        remote.clear()
        self.assertIsNone(remote.command)
        self.assertFalse(add.defined)


if __name__ == "__main__":
    unittest.main()

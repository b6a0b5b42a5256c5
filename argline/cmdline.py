"""
Argline engine: resolve a token list against registered arguments.

What this module provides
- CmdLine: owns the top-level registry, the token list, the active command and
  the configuration, and drives the parse:
  • pre-parse validation: every name registered once across the namespace
    (non-command arguments first, then commands);
  • dispatch loop: classify each token as long argument ("--name"), flag combo
    ("-abc") or bare word, resolve it and let the node consume what it needs;
  • post-parse validation: required arguments, groups and the mandatory command.

Token rules
- "name=value" is split at the first "="; a non-empty value is pushed back so
  the node owning "name" reads it as its value token. "name=" is treated as
  "name" (an EmptyInlineValueWarning is issued).
- In a combo every character is a short flag; only the last one may take a
  value, and nothing is processed unless every character resolves.
- Bare words resolve to operands or commands. Invoking a command opens its
  namespace; a second command in the same scope is an error.

Faults
- Parsing stops at the first fault. With shell=False (default) it is raised to
  the caller; with shell=True it is rendered through rich on stderr and the
  process exits with status 1 (see argline.faults).

Quick start
    from argline import CmdLine, Flag, Option

    cmdline = CmdLine(["-vf", "file.txt"])
    verbose = cmdline.add_argument(Flag("-v", "--verbose"))
    file = cmdline.add_argument(Option("-f", "--file", required=True))
    cmdline.parse()
    assert verbose.defined and file.value == "file.txt"
"""
import os.path
import shlex
import sys
from collections.abc import Iterable

from .arguments import Kind
from .builders import Builder
from .commands import Command
from .context import Context
from .diagnostics import suggest
from .faults import *
from .registry import Registry, Scope
from .utils import *


def _tokenize(tokens, /):
    """
    Normalize the constructor input into a list of tokens.

    - Unset: the process arguments without the program name.
    - str: split like a shell would (shlex.split).
    - Iterable[str]: used as-is.
    """
    if tokens is Unset:
        return sys.argv[1:]
    elif isinstance(tokens, str):
        return shlex.split(tokens)
    elif isinstance(tokens, Iterable):
        tokens = list(tokens)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("cmdline() tokens must be a string or an iterable of strings")
        return tokens
    raise TypeError("cmdline() tokens must be a string or an iterable of strings")


class CmdLine(Scope):
    """
    Top-level parser.

    Parameters
    - tokens: Unset | str | Iterable[str]
      Raw arguments (program name excluded). Defaults to sys.argv[1:].
    - name: str (keyword-only)
      Program name shown in rendered faults; defaults to the basename of sys.argv[0].
    - command_required: bool (keyword-only)
      Fail with MissingCommandError when no command is invoked.
    - shell: bool (keyword-only)
      Render faults and exit instead of raising.
    - fancy: bool (keyword-only)
      Render faults inside a panel.
    - colorful: bool (keyword-only)
      Style rendered faults (palette overridable through __main__.__styles__).
    """

    def __init__(
            self,
            tokens=Unset,
            /,
            *,
            name=Unset,
            command_required=False,
            shell=False,
            fancy=False,
            colorful=True,
    ):
        if not isinstance(name, str | Unset):
            raise TypeError("cmdline() 'name' must be a string")
        elif isinstance(name, str) and not (name := name.strip()):
            raise ValueError("cmdline() 'name' cannot be empty")

        self._tokens = _tokenize(tokens)
        self._name = coalesce(name, os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "argline")
        self._command_required = bool(command_required)
        self._shell = bool(shell)
        self._fancy = bool(fancy)
        self._colorful = bool(colorful)
        self._registry = Registry(self)
        self._command = None
        self._context = None

    name = mirror("name")
    tokens = mirror("tokens")
    shell = mirror("shell")
    fancy = mirror("fancy")
    colorful = mirror("colorful")

    @property
    def context(self):
        """
        Cursor of the running (or last) parse, None before the first parse().
        """
        return self._context

    def add_command(self, name, /, *, valued=False, command_required=False, default=None):
        """
        Create, register (owned) and return a builder for a top-level command.
        """
        command = self.add_argument(
            Command(name, valued=valued, command_required=command_required, default=default)
        )
        return Builder(self, command)

    def find_argument(self, name, /):
        """
        Resolve name in the currently reachable namespace.

        The top level is searched first (commands by their own name only),
        then the active command's children, then its active sub-command's, etc.
        """
        return self._lookup(name)

    def is_misspelled(self, candidate, suggestions, /):
        return self._misspelled(candidate, suggestions)

    def clear(self):
        self._clear_children()

    def trigger(self, fault, /, **options):
        trigger(
            fault,
            **options,
            tool=self,
            shell=self._shell,
            fancy=self._fancy,
            colorful=self._colorful,
        )

    def parse(self):
        """
        Parse the tokens; return on success, raise (or render and exit) on failure.
        """
        try:
            self._parse()
        except CommandException as fault:
            self.trigger(fault)

    def _parse(self):
        self.clear()
        self._check_before()

        self._context = context = Context(self._tokens)

        while not context.at_end():
            word = context.next()

            name, separator, value = word.partition("=")
            if separator:
                if value:
                    context.prepend(value)
                else:
                    self.trigger(EmptyInlineValueWarning(
                        "empty inline value for %r at %s position is ignored" % (name, ordinal(context.position)),
                        title="empty inline value",
                        code=FaultCode.EMPTY_INLINE_VALUE,
                        input=name,
                        index=context.position,
                        hint="add a value after '=' (for example: %s=<value>) or drop the '='" % name,
                        docs=getdoc(FaultCode.EMPTY_INLINE_VALUE),
                    ))
                word = name

            if isargument(word):
                if (argument := self.find_argument(word)) is None:
                    self._unknown(word)
                argument.process(context)
            elif isflag(word):
                self._combo(word)
            else:
                if (argument := self.find_argument(word)) is None:
                    self._unknown(word)
                if argument.kind is Kind.COMMAND:
                    scope = argument.parent if argument.parent is not None else self
                    scope._activate(argument, context)
                else:
                    argument.process(context)

        self._check_after()

    def _combo(self, word, /):
        context = self._context
        arguments = []
        for index, char in enumerate(word[1:], 1):
            if (argument := self.find_argument(flag := "-" + char)) is None:
                self._unknown(flag)
            if index < len(word) - 1 and argument.valued:
                raise FlagComboValueError(
                    "only the last flag in combo %r can take a value, but %r does (%s position)" % (
                        word, flag, ordinal(context.position)
                    ),
                    title="value in flag combo",
                    code=FaultCode.FLAG_COMBO_VALUE,
                    input=word,
                    index=context.position,
                    argument=argument,
                    hint="move %s to the end of the combo or pass it separately" % flag,
                    docs=getdoc(FaultCode.FLAG_COMBO_VALUE),
                )
            arguments.append(argument)

        for argument in arguments:
            argument.process(context)

    def _unknown(self, word, /):
        suggestions = []
        index = self._context.position if self._context is not None else 0
        if self.is_misspelled(word, suggestions):
            message = "unknown argument %r at %s position, probably you mean %s" % (
                word, ordinal(index), suggest(suggestions)
            )
            hint = "did you mean %s?" % suggest(suggestions)
        else:
            message = "unknown argument %r at %s position" % (word, ordinal(index))
            hint = "check the spelling of %r" % word
        raise UnknownArgumentError(
            message,
            title="unknown argument",
            code=FaultCode.UNKNOWN_ARGUMENT,
            input=word,
            index=index,
            suggestions=tuple(suggestions),
            hint=hint,
            docs=getdoc(FaultCode.UNKNOWN_ARGUMENT),
        )

    def _check_before(self):
        self._check_children_before(set(), set())

    def _check_after(self):
        self._check_children_after()

    def __repr__(self):
        return "cmdline(name=%r, arguments=%r, command=%r)" % (
            self._name, len(self._registry), self._command.name if self._command else None
        )


__all__ = (
    "CmdLine",
)

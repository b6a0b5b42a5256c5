"""
Argline faults: codes, error and warning types, and how they reach the user.

- FaultCode: stable numeric ids grouped by phase (registration, dispatch,
  completeness, warnings). Hosts may relabel them through __main__.__codes__.
- CommandException / CommandWarning: a lowercase one-sentence message plus
  keyword options (title, code, hint, docs and context such as input, index,
  suggestions). str(fault) is the message; options is a read-only mapping.
- trigger(fault, **options): merge runtime options into the fault, then either
  raise it (errors) / warnings.warn it (warnings), or, in shell mode, render
  it through rich on stderr (errors then exit with status 1).
- getdoc(code): optional long description from __main__.__docs__.

Rendered shape (shell mode):

    [ prog — 11111 | Unknown Argument ]
    unknown argument '--outptu' at first position, probably you mean '--output'
     → did you mean '--output'?

Host hooks read from __main__: __prog__, __codes__, __docs__, __styles__.
"""
import inspect
import sys
import warnings
from abc import ABC
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    stable fault identifiers.

    - 1110x registration: REDEFINED_ARGUMENT, NULL_ARGUMENT
    - 1111x dispatch: UNKNOWN_ARGUMENT, FLAG_COMBO_VALUE, MULTIPLE_COMMANDS,
      MISSING_VALUE, DUPLICATED_ARGUMENT, EXHAUSTED_TOKENS
    - 1112x completeness: REQUIRED_ARGUMENT, MISSING_COMMAND, GROUP_CONSTRAINT
    - 12xxx warnings: EMPTY_INLINE_VALUE
    """
    # --- registration errors (1110x) ---
    REDEFINED_ARGUMENT          = 11101
    NULL_ARGUMENT               = 11102

    # --- dispatch errors (1111x) ---
    UNKNOWN_ARGUMENT            = 11111
    FLAG_COMBO_VALUE            = 11112
    MULTIPLE_COMMANDS           = 11113
    MISSING_VALUE               = 11114
    DUPLICATED_ARGUMENT         = 11115
    EXHAUSTED_TOKENS            = 11116

    # --- completeness errors (1112x) ---
    REQUIRED_ARGUMENT           = 11121
    MISSING_COMMAND             = 11122
    GROUP_CONSTRAINT            = 11123

    # --- warnings (12xxx) ---
    EMPTY_INLINE_VALUE          = 12111

    def normalize(self):
        """
        label shown for this code: __main__.__codes__[self] if the host maps it,
        else the number as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


ERROR_STYLES = {
    "prog-name": "bold #E6E6F0",
    "code": "bold #00E5FF",
    "title": "bold #FF4DA6",
    "message": "#C8C8D0",
    "hint-arrow": "#9CE19C dim",
    "hint": "italic #9CE19C",
}

WARNING_STYLES = {
    "prog-name": "bold #E6E6F0",
    "code": "bold #FFB400",
    "title": "bold #FFC2E0",
    "message": "#D6D6DE",
    "hint-arrow": "#B8EFAF dim",
    "hint": "italic #B8EFAF",
}


def _prog(options):
    main = __import__("__main__")
    if hasattr(main, "__prog__"):
        return main.__prog__
    tool = options.get("tool")
    return tool.name if tool is not None else "argline"


def _render(fault, palette, fallback):
    # Shared by errors and warnings; __main__.__styles__ overrides the palette.
    styles = defaultdict(str, palette | getattr(__import__("__main__"), "__styles__", {}))
    colorful = fault.options.get("colorful", False)

    def text(fragment, style):
        return Text(str(fragment), styles[style] if colorful else "")

    code = fault.options.get("code")
    title = fault.options.get("title") or fallback
    header = Text.assemble(
        "[ ",
        text(_prog(fault.options), "prog-name"),
        " — ",
        text(code.normalize() if code else "?", "code"),
        " | ",
        text(title.title(), "title"),
        " ]",
    )
    renders = [text(fault.message, "message")]
    if hint := fault.options.get("hint"):
        renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))

    if fault.options.get("fancy", False):
        return Panel(Group(*renders), title=header, title_align="left", width=console.width - 4)
    return Group(header, *renders)


class CommandException(Exception):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, ERROR_STYLES, "error")

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class RedefinitionError(CommandException): ...
class NullArgumentError(CommandException): ...
class UnknownArgumentError(CommandException): ...
class FlagComboValueError(CommandException): ...
class MultipleCommandsError(CommandException): ...
class MissingValueError(CommandException): ...
class DuplicatedArgumentError(CommandException): ...
class ExhaustedError(CommandException): ...
class RequiredArgumentMissingError(CommandException): ...
class MissingCommandError(CommandException): ...
class GroupConstraintError(CommandException): ...


class CommandWarning(ABC, Warning):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        return _render(self, WARNING_STYLES, "warning")

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=len(inspect.stack()))
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class EmptyInlineValueWarning(CommandWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault: fault.__replace__(**options).__trigger__().

    the engine passes tool, shell, fancy and colorful here; anything else
    (title, code, hint, docs, input, index, suggestions) travels the same way.
    """
    if not callable(getattr(fault, "__trigger__", None)) or not callable(getattr(fault, "__replace__", None)):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    description of code from __main__.__docs__, or None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    return getattr(__import__("__main__"), "__docs__", {}).get(code)


__all__ = (
    "CommandException",
    "RedefinitionError",
    "NullArgumentError",
    "UnknownArgumentError",
    "FlagComboValueError",
    "MultipleCommandsError",
    "MissingValueError",
    "DuplicatedArgumentError",
    "ExhaustedError",
    "RequiredArgumentMissingError",
    "MissingCommandError",
    "GroupConstraintError",
    "CommandWarning",
    "EmptyInlineValueWarning",
    "FaultCode",
    "trigger",
    "getdoc",
)

r"""
Argline argument nodes.

Overview
- Kind: the tag the engine switches on (FLAG, NAMED, COMMAND, GROUP).
- Argument: the capability contract every node satisfies:
  • identity: names (first one is the display name), kind, valued, required.
  • dispatch: process(context) consumes the node (and its value, if any).
  • lookup: find(name) answers "is this name mine?", identifiers() lists the
    names the node occupies in its sibling scope.
  • diagnostics: is_misspelled(candidate, suggestions).
  • validation: check_before(flags, names) and check_after().
  • bookkeeping: defined, count, value(s); clear() resets them.
- Concrete kinds
  • Flag: presence-only switch (-v, --verbose); multiple=True counts repeats.
  • Option: value-bearing switch (-o, --output); multiple=True collects values.
  • Operand: dash-less word (add, remove) referenced bare; optionally valued.

Introspection & representation
- ArgumentType metaclass provides stable __repr__/__rich_repr__ and exposes
  selected fields via read-only properties declared in __introspectable__.

Name rules (sanitized on construction)
- short switch: "-x" where x is a single letter or digit.
- long switch: "--name" with hyphen-separated letter/digit segments.
- words (Operand, Command): r"[^\W_][\w-]*" (no leading dash, no "=").

Example
    >>> verbose = Flag("-v", "--verbose", multiple=True)
    >>> output = Option("-o", "--output", default="a.out")
"""
import functools
import operator
import re
import weakref
from enum import Enum

from .diagnostics import ismisspelled
from .faults import *
from .utils import *

_SHORT = re.compile(r"-[^\W_]")
_LONG = re.compile(r"--[^\W_](-?[^\W_]+)*")
_WORD = re.compile(r"[^\W_][\w-]*")


class Kind(Enum):
    """
    Type tag of an argument node.

    Only COMMAND and GROUP are special-cased by the engine: commands open a
    private namespace once invoked, groups are transparent containers whose
    children live in the enclosing namespace.
    """
    FLAG = "flag"
    NAMED = "named"
    COMMAND = "command"
    GROUP = "group"


class ArgumentType(type):
    """
    Metaclass that turns node classes into introspectable descriptors.

    Responsibilities
    - Derive __typename__ from the class name (camel-case split with hyphens)
      for consistent, human-friendly labels in messages.
    - Expose selected fields as read-only properties using mirror() for all
      names listed in __introspectable__.
    - Provide stable, readable __repr__/__rich_repr__ implementations.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
            **options
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Return a concise, stable representation with key metadata.

            Example
            - flag(names=('-v', '--verbose'), required=False, ...)
            """
            return "%s(%s)" % (
                type(self).__typename__,
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            )
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield a sequence of (name, object) pairs for pretty printers.
            """
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_names(cls, names, pattern, /):
    """
    Internal: validate node names against the kind's shape and reject duplicates.

    Returns the names as a tuple in declaration order (the first one is the
    display name).
    """
    if not names:
        raise TypeError(f"{cls.__typename__} must specify at least one name")
    sanitized = []
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"{cls.__typename__} names must be strings")
        elif not (name := name.strip()):
            raise ValueError(f"{cls.__typename__} names cannot be empty-strings")
        elif not any(regex.fullmatch(name) for regex in pattern):
            raise ValueError(f"{cls.__typename__} name {name!r} is not a valid name for this kind")
        elif name in sanitized:
            raise ValueError(f"{cls.__typename__} names cannot contain duplicates")
        sanitized.append(name)
    return tuple(sanitized)


class Argument(metaclass=ArgumentType):
    """
    Base node: shared identity, bookkeeping, lookup and validation.

    Subclasses set the class-level `_kind` and decide whether instances are
    `_valued`. Nodes are attached to exactly one scope (engine, command or
    group); the back-reference is weak so a node never keeps its scope alive.
    """

    __introspectable__ = (
        "names",
        "kind",
        "valued",
        "required",
        "multiple",
        "default",
        "defined",
        "count",
    )

    _kind = Unset
    _valued = False

    def __init__(self, names, /, *, required=False, multiple=False, default=None):
        if type(self)._kind is Unset:
            raise TypeError(f"{type(self).__typename__} is an abstract argument")
        self._names = names
        self._required = bool(required)
        self._multiple = bool(multiple)
        self._default = default
        self._parent = None
        self._defined = False
        self._count = 0
        self._values = []

    @property
    def name(self):
        return self._names[0]

    @property
    def value(self):
        """
        Last consumed value, or the default when none was consumed.
        """
        return self._values[-1] if self._values else self._default

    @property
    def values(self):
        return tuple(self._values)

    @property
    def attached(self):
        return self._parent is not None

    @property
    def parent(self):
        """
        Enclosing command or group, None when attached directly to the engine.
        """
        owner = self._parent() if self._parent is not None else None
        return owner if isinstance(owner, Argument) else None

    @property
    def cmdline(self):
        """
        Engine this node is (transitively) registered into, or None.
        """
        owner = self._parent() if self._parent is not None else None
        while isinstance(owner, Argument):
            owner = owner._parent() if owner._parent is not None else None
        return owner

    def _attach(self, owner, /):
        self._parent = weakref.ref(owner)

    def clear(self):
        self._defined = False
        self._count = 0
        self._values.clear()

    def identifiers(self):
        """
        Names this node occupies in its sibling scope.
        """
        yield from self._names

    def find(self, name, /):
        return self if name in self._names else None

    def process(self, context, /):
        """
        Record an occurrence and consume the value token when value-bearing.

        Raises
        - DuplicatedArgumentError: seen before and not multiple.
        - MissingValueError: value-bearing but nothing usable follows.
        """
        if self._defined and not self._multiple:
            raise DuplicatedArgumentError(
                "%s %r at %s position was already provided" % (
                    self.__typename__, self.name, ordinal(context.position)
                ),
                title="duplicated %s" % self.__typename__,
                code=FaultCode.DUPLICATED_ARGUMENT,
                input=self.name,
                index=context.position,
                argument=self,
                hint="keep a single %r; it can be specified only once" % self.name,
                docs=getdoc(FaultCode.DUPLICATED_ARGUMENT),
            )
        if self._valued:
            self._values.append(self._consume(context))
        self._defined = True
        self._count += 1

    def _consume(self, context, /):
        index = context.position
        if context.at_end():
            raise MissingValueError(
                "%s %r at %s position requires a value that was not presented" % (
                    self.__typename__, self.name, ordinal(index)
                ),
                title="missing value",
                code=FaultCode.MISSING_VALUE,
                input=self.name,
                index=index,
                argument=self,
                hint="pass a value after it (for example: %s <value>)" % self.name,
                docs=getdoc(FaultCode.MISSING_VALUE),
            )
        value = context.next()
        if isargument(value) or isflag(value):
            raise MissingValueError(
                "%s %r at %s position requires a value, but %r looks like an argument" % (
                    self.__typename__, self.name, ordinal(index), value
                ),
                title="missing value",
                code=FaultCode.MISSING_VALUE,
                input=self.name,
                index=index,
                argument=self,
                hint="values cannot start with '-'; pass a plain value after %s" % self.name,
                docs=getdoc(FaultCode.MISSING_VALUE),
            )
        return value

    def is_misspelled(self, candidate, suggestions, /):
        """
        Append every name of this node that candidate looks like a typo of.

        Returns True when at least one name matched; suggestions keeps its
        order and never receives the same name twice.
        """
        found = False
        for name in self._names:
            if ismisspelled(candidate, name):
                if name not in suggestions:
                    suggestions.append(name)
                found = True
        return found

    def check_before(self, flags, names, /):
        """
        Register this node's names into the shared accumulators.

        Short switches ("-x") go into flags, everything else into names.
        """
        for name in self.identifiers():
            bucket = flags if isflag(name) else names
            if name in bucket:
                raise RedefinitionError(
                    "argument name %r is defined more than once" % name,
                    title="redefined argument",
                    code=FaultCode.REDEFINED_ARGUMENT,
                    input=name,
                    argument=self,
                    hint="give every argument a unique name within its scope",
                    docs=getdoc(FaultCode.REDEFINED_ARGUMENT),
                )
            bucket.add(name)

    def check_after(self):
        if self._required and not self._defined:
            raise RequiredArgumentMissingError(
                "required %s %r was not provided" % (self.__typename__, self.name),
                title="required %s missing" % self.__typename__,
                code=FaultCode.REQUIRED_ARGUMENT,
                input=self.name,
                argument=self,
                hint="add %s to the command line" % self.name,
                docs=getdoc(FaultCode.REQUIRED_ARGUMENT),
            )


class Flag(Argument):
    """
    Presence-only switch.

    With multiple=True every occurrence is counted (-vvv -> count == 3);
    otherwise a second occurrence is a DuplicatedArgumentError.
    """
    _kind = Kind.FLAG

    def __init__(self, *names, required=False, multiple=False):
        super().__init__(
            _sanitize_names(type(self), names, (_SHORT, _LONG)),
            required=required,
            multiple=multiple,
            default=False,
        )

    @property
    def value(self):
        return self._defined


class Option(Argument):
    """
    Value-bearing switch: consumes the token that follows it.

    "--output=a.txt" reaches it as "--output" followed by "a.txt". With
    multiple=True every occurrence appends to values.
    """
    _kind = Kind.NAMED
    _valued = True

    def __init__(self, *names, required=False, multiple=False, default=None):
        super().__init__(
            _sanitize_names(type(self), names, (_SHORT, _LONG)),
            required=required,
            multiple=multiple,
            default=default,
        )


class Operand(Argument):
    """
    Dash-less word argument ("add", "clean") referenced bare on the command line.

    Unlike a command it opens no namespace; when valued it consumes the next token.
    """
    _kind = Kind.NAMED

    def __init__(self, name, /, *, valued=False, required=False, multiple=False, default=None):
        super().__init__(
            _sanitize_names(type(self), (name,), (_WORD,)),
            required=required,
            multiple=multiple,
            default=default,
        )
        self._valued = bool(valued)


__all__ = (
    "Kind",
    "Argument",
    "Flag",
    "Option",
    "Operand",
)

"""
Sibling registries and the scope behaviour shared by the engine and commands.

Registry
- Ordered collection of argument nodes (registration order is kept; it drives
  validation and suggestion order, never matching).
- Every entry carries its ownership tag: owned nodes are held strongly, borrowed
  nodes only through a weak reference, so the caller keeps lifetime control.
- Registration rejects None, the same node twice, a node already attached to
  another scope and any sibling name collision.

Scope
- Mixin for anything that owns a registry and may have one active command:
  the engine (CmdLine) and Command itself. It provides the scoped lookup used
  while parsing, the suggestion sweep, both validation sweeps and command
  activation, so nested commands behave exactly like the top level.
"""
import weakref
from typing import NamedTuple

from .arguments import Argument, Kind
from .faults import *
from .utils import ordinal


class Entry(NamedTuple):
    """
    One registered node plus its ownership tag.
    """
    reference: object
    owned: bool

    @property
    def argument(self):
        return self.reference if self.owned else self.reference()


class Registry:
    def __init__(self, owner, /):
        self._owner = weakref.ref(owner)
        self._entries = []

    @property
    def entries(self):
        return tuple(self._entries)

    def add(self, argument, /, *, owned=True):
        if argument is None:
            raise NullArgumentError(
                "attempt to add null as an argument",
                title="null argument",
                code=FaultCode.NULL_ARGUMENT,
                hint="pass an argument instance",
                docs=getdoc(FaultCode.NULL_ARGUMENT),
            )
        if not isinstance(argument, Argument):
            raise TypeError("registry argument must be an argument, not %r" % type(argument).__name__)

        if argument in self:
            raise RedefinitionError(
                "argument %r is already registered" % argument.name,
                title="redefined argument",
                code=FaultCode.REDEFINED_ARGUMENT,
                input=argument.name,
                argument=argument,
                hint="register every argument once",
                docs=getdoc(FaultCode.REDEFINED_ARGUMENT),
            )
        if argument.attached:
            raise RedefinitionError(
                "argument %r already belongs to another scope" % argument.name,
                title="redefined argument",
                code=FaultCode.REDEFINED_ARGUMENT,
                input=argument.name,
                argument=argument,
                hint="create a separate argument for each scope",
                docs=getdoc(FaultCode.REDEFINED_ARGUMENT),
            )

        identifiers = set(argument.identifiers())
        for sibling in self:
            if clashes := identifiers.intersection(sibling.identifiers()):
                raise RedefinitionError(
                    "argument name %r is already in use by %r" % (min(clashes), sibling.name),
                    title="redefined argument",
                    code=FaultCode.REDEFINED_ARGUMENT,
                    input=min(clashes),
                    argument=argument,
                    hint="give every argument a unique name within its scope",
                    docs=getdoc(FaultCode.REDEFINED_ARGUMENT),
                )

        argument._attach(self._owner())
        self._entries.append(Entry(argument if owned else weakref.ref(argument), bool(owned)))
        return argument

    def __iter__(self):
        for entry in self._entries:
            if (argument := entry.argument) is None:
                raise NullArgumentError(
                    "a borrowed argument was released while still registered",
                    title="null argument",
                    code=FaultCode.NULL_ARGUMENT,
                    hint="keep a reference to arguments added with owned=False",
                    docs=getdoc(FaultCode.NULL_ARGUMENT),
                )
            yield argument

    def __contains__(self, argument):
        return any(entry.argument is argument for entry in self._entries)

    def __len__(self):
        return len(self._entries)


class Scope:
    """
    Registry-backed namespace with at most one active command.

    Hosts must set `_registry`, `_command` and `_command_required` and expose
    `name`.
    """

    def add_argument(self, argument, /, *, owned=True):
        """
        Register a node into this scope and return it.

        owned=False keeps only a weak reference: the caller stays responsible
        for keeping the node alive until parsing is over.
        """
        return self._registry.add(argument, owned=owned)

    @property
    def arguments(self):
        return tuple(self._registry)

    @property
    def entries(self):
        """
        Registered nodes with their ownership tags, in registration order.
        """
        return self._registry.entries

    @property
    def command(self):
        """
        The command invoked in this scope, or None.
        """
        return self._command

    @property
    def command_required(self):
        return self._command_required

    def _lookup(self, name, /):
        # Commands match by their own name only; their children become visible
        # once the command is active.
        for argument in self._registry:
            if argument.kind is Kind.COMMAND:
                if name in argument.names:
                    return argument
            elif (found := argument.find(name)) is not None:
                return found
        if self._command is not None:
            return self._command._lookup(name)
        return None

    def _misspelled(self, candidate, suggestions, /):
        found = False
        for argument in self._registry:
            if argument.kind is Kind.COMMAND and argument is not self._command:
                found |= argument.is_misspelled_command(candidate, suggestions)
            else:
                found |= argument.is_misspelled(candidate, suggestions)
        return found

    def _activate(self, command, context, /):
        if self._command is not None:
            raise MultipleCommandsError(
                "only one command can be specified, but %r and %r were given (%s position)" % (
                    self._command.name, command.name, ordinal(context.position)
                ),
                title="multiple commands",
                code=FaultCode.MULTIPLE_COMMANDS,
                input=command.name,
                index=context.position,
                commands=(self._command, command),
                hint="run one command at a time",
                docs=getdoc(FaultCode.MULTIPLE_COMMANDS),
            )
        self._command = command
        command.process(context)

    def _check_children_before(self, flags, names, /):
        # Non-command nodes first, then every command name, then the command
        # subtrees, so a child is checked against the whole enclosing scope.
        commands = []
        for argument in self._registry:
            if argument.kind is Kind.COMMAND:
                commands.append(argument)
            else:
                argument.check_before(flags, names)
        for command in commands:
            command.check_name_before(flags, names)
        for command in commands:
            command.check_children_before(flags, names)

    def _check_children_after(self):
        for argument in self._registry:
            argument.check_after()
        if self._command_required and self._command is None:
            raise MissingCommandError(
                "no command was specified for %r" % self.name,
                title="missing command",
                code=FaultCode.MISSING_COMMAND,
                hint="add one of: %s" % ", ".join(
                    argument.name for argument in self._registry if argument.kind is Kind.COMMAND
                ),
                docs=getdoc(FaultCode.MISSING_COMMAND),
            )

    def _clear_children(self):
        self._command = None
        for argument in self._registry:
            argument.clear()


__all__ = (
    "Entry",
    "Registry",
    "Scope",
)

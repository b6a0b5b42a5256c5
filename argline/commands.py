"""
Argline command node: an argument that owns a private namespace.

What this module provides
- Command: a dash-less word ("push", "build") that, once invoked, makes its
  children resolvable for the rest of the command line. Children may be any
  argument kind, groups, or further commands (git-style sub-commands).

Core ideas
- Registries within registries: a command keeps its children in the same kind
  of Registry the engine uses, and shares the engine's scope behaviour
  (lookup, activation, validation) through the Scope mixin.
- One command per scope: invoking a second command in a scope that already
  has an active one is a MultipleCommandsError.
- Validation only descends into invoked commands; children of commands that
  were never invoked are not required to be satisfied.

Example
    >>> push = Command("push")
    >>> force = push.add_argument(Flag("-f", "--force", required=True))
"""
from .arguments import Argument, Kind, _sanitize_names, _WORD
from .registry import Registry, Scope


class Command(Scope, Argument):
    """
    Command node with its own child registry.

    Parameters
    - name: str
      Word that invokes the command.
    - valued: bool (keyword-only)
      Consume the token right after the command name as its value.
    - command_required: bool (keyword-only)
      Once invoked, one of its sub-commands must be invoked as well.
    - default: any (keyword-only)
      Value reported when valued and not given.
    """

    __introspectable__ = Argument.__introspectable__ + (
        "command_required",
    )

    _kind = Kind.COMMAND

    def __init__(self, name, /, *, valued=False, command_required=False, default=None):
        super().__init__(_sanitize_names(type(self), (name,), (_WORD,)), default=default)
        self._valued = bool(valued)
        self._command_required = bool(command_required)
        self._registry = Registry(self)
        self._command = None

    def clear(self):
        super().clear()
        self._clear_children()

    def find(self, name, /):
        """
        Return self when name is the command's own, else search all children.
        """
        if name in self._names:
            return self
        for argument in self._registry:
            if (found := argument.find(name)) is not None:
                return found
        return None

    def find_child(self, name, /):
        """
        Resolve name inside the command's private namespace.

        Sub-commands match by their own name; the children of an invoked
        sub-command are searched after this command's own children.
        """
        return self._lookup(name)

    def is_misspelled(self, candidate, suggestions, /):
        found = super().is_misspelled(candidate, suggestions)
        return self._misspelled(candidate, suggestions) or found

    def is_misspelled_command(self, candidate, suggestions, /):
        """
        Check only the command's own name; the subtree is left alone.
        """
        return Argument.is_misspelled(self, candidate, suggestions)

    def check_before(self, flags, names, /):
        self.check_name_before(flags, names)
        self.check_children_before(flags, names)

    def check_name_before(self, flags, names, /):
        """
        Register only the command's own name into the enclosing accumulators.
        """
        super().check_before(flags, names)

    def check_children_before(self, flags, names, /):
        # Children see the enclosing namespace but do not leak into it, so
        # sibling commands may reuse child names.
        self._check_children_before(set(flags), set(names))

    def check_after(self):
        if not self._defined:
            return
        self._check_children_after()


__all__ = (
    "Command",
)

"""
Argument groups: constraints over sets of sibling arguments.

A group is a transparent container. Its children are resolved, validated and
suggested as if they were registered directly in the enclosing scope; the
group only adds a post-parse constraint:

- OnlyOneGroup: at most one child may be given (exactly one when required).
- AllOfGroup: all children or none (all when required).
- AtLeastOneGroup: at least one child when required.

Children carry no required flag of their own; requiredness belongs to the group.
"""
from .arguments import Argument, Kind
from .faults import *
from .registry import Registry


class Group(Argument):
    """
    Base container; concrete groups implement _constrain().
    """

    _kind = Kind.GROUP

    def __init__(self, name, /, *, required=False):
        if not isinstance(name, str):
            raise TypeError(f"{type(self).__typename__} name must be a string")
        elif not (name := name.strip()):
            raise ValueError(f"{type(self).__typename__} name cannot be empty")
        super().__init__((name,), required=required)
        self._registry = Registry(self)

    @property
    def arguments(self):
        return tuple(self._registry)

    @property
    def entries(self):
        return self._registry.entries

    @property
    def defined(self):
        return any(argument.defined for argument in self._registry)

    def add_argument(self, argument, /, *, owned=True):
        if isinstance(argument, Argument) and argument.kind is Kind.COMMAND:
            raise TypeError(f"{type(self).__typename__} cannot hold commands")
        return self._registry.add(argument, owned=owned)

    def clear(self):
        super().clear()
        for argument in self._registry:
            argument.clear()

    def identifiers(self):
        for argument in self._registry:
            yield from argument.identifiers()

    def find(self, name, /):
        for argument in self._registry:
            if (found := argument.find(name)) is not None:
                return found
        return None

    def process(self, context, /):
        raise TypeError(f"{type(self).__typename__} cannot be processed; its children are")

    def is_misspelled(self, candidate, suggestions, /):
        found = False
        for argument in self._registry:
            found |= argument.is_misspelled(candidate, suggestions)
        return found

    def check_before(self, flags, names, /):
        for argument in self._registry:
            if argument.required:
                raise GroupConstraintError(
                    "argument %r in %s %r cannot be required" % (argument.name, self.__typename__, self.name),
                    title="required argument in group",
                    code=FaultCode.GROUP_CONSTRAINT,
                    argument=argument,
                    hint="mark the group as required instead",
                    docs=getdoc(FaultCode.GROUP_CONSTRAINT),
                )
            argument.check_before(flags, names)

    def check_after(self):
        for argument in self._registry:
            argument.check_after()
        given = [argument for argument in self._registry if argument.defined]
        self._constrain(given)

    def _constrain(self, given, /):
        raise NotImplementedError

    def _fail(self, message, hint, /):
        raise GroupConstraintError(
            message,
            title="%s violated" % self.__typename__.replace("-", " "),
            code=FaultCode.GROUP_CONSTRAINT,
            group=self,
            hint=hint,
            docs=getdoc(FaultCode.GROUP_CONSTRAINT),
        )

    def _listing(self):
        return ", ".join(repr(argument.name) for argument in self._registry)


class OnlyOneGroup(Group):
    def _constrain(self, given, /):
        if len(given) > 1:
            self._fail(
                "only one of %s can be given, but %s were" % (
                    self._listing(), " and ".join(repr(argument.name) for argument in given)
                ),
                "keep a single argument from %r" % self.name,
            )
        if self._required and not given:
            self._fail(
                "one of %s is required" % self._listing(),
                "add one argument from %r" % self.name,
            )


class AllOfGroup(Group):
    def _constrain(self, given, /):
        if (given or self._required) and len(given) != len(self._registry):
            missing = [argument.name for argument in self._registry if not argument.defined]
            self._fail(
                "all of %s must be given together, missing %s" % (
                    self._listing(), ", ".join(map(repr, missing))
                ),
                "add the missing arguments or remove the others",
            )


class AtLeastOneGroup(Group):
    def _constrain(self, given, /):
        if self._required and not given:
            self._fail(
                "at least one of %s is required" % self._listing(),
                "add one or more arguments from %r" % self.name,
            )


__all__ = (
    "Group",
    "OnlyOneGroup",
    "AllOfGroup",
    "AtLeastOneGroup",
)

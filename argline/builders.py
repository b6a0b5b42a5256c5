"""
Fluent registration handles.

CmdLine.add_command() returns a Builder so a whole sub-tree can be declared
in one expression:

    cmdline = CmdLine(["push", "--force"])
    (cmdline.add_command("push")
        .flag("-f", "--force")
        .option("--remote", default="origin")
        .only_one("mode")
            .flag("--tags")
            .flag("--all")
            .end()
        .end())

Every method that registers a leaf returns the same builder; command() and the
group methods return a nested builder whose end() returns the enclosing one
(or the engine, for the outermost builder).
"""
from .arguments import Flag, Option, Operand
from .commands import Command
from .groups import OnlyOneGroup, AllOfGroup, AtLeastOneGroup


class Builder:
    def __init__(self, parent, target, /):
        self._parent = parent
        self._target = target

    @property
    def target(self):
        """
        The command or group being populated.
        """
        return self._target

    def argument(self, argument, /, *, owned=True):
        self._target.add_argument(argument, owned=owned)
        return self

    def flag(self, *names, **options):
        return self.argument(Flag(*names, **options))

    def option(self, *names, **options):
        return self.argument(Option(*names, **options))

    def operand(self, name, /, **options):
        return self.argument(Operand(name, **options))

    def command(self, name, /, **options):
        if not isinstance(self._target, Command):
            raise TypeError("only commands can hold sub-commands")
        return Builder(self, self._target.add_argument(Command(name, **options)))

    def only_one(self, name, /, **options):
        return Builder(self, self._target.add_argument(OnlyOneGroup(name, **options)))

    def all_of(self, name, /, **options):
        return Builder(self, self._target.add_argument(AllOfGroup(name, **options)))

    def at_least_one(self, name, /, **options):
        return Builder(self, self._target.add_argument(AtLeastOneGroup(name, **options)))

    def end(self):
        return self._parent

    def __repr__(self):
        return "builder(target=%r)" % self._target


__all__ = (
    "Builder",
)

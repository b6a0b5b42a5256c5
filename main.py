from rich.pretty import pprint

from argline import *

__prog__ = "vcs"

cmdline = CmdLine(shell=True, fancy=True, command_required=True)
verbose = cmdline.add_argument(Flag("-v", "--verbose", multiple=True))

(cmdline.add_command("push")
    .flag("-f", "--force")
    .option("--remote", default="origin")
    .only_one("refs")
        .flag("--tags")
        .flag("--all")
        .end()
    .end())

(cmdline.add_command("remote", command_required=True)
    .command("add")
        .operand("name", valued=True, required=True)
        .option("--url", required=True)
        .end()
    .command("remove")
        .operand("name", valued=True, required=True)
        .end()
    .end())


if __name__ == '__main__':
    cmdline.parse()
    pprint(cmdline.command)
    pprint(cmdline.find_argument("--verbose"))

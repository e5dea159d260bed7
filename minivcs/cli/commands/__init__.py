"""CLI commands for minivcs."""

from minivcs.cli.commands.init import init_cmd
from minivcs.cli.commands.add import add_cmd
from minivcs.cli.commands.commit import commit_cmd
from minivcs.cli.commands.log import log_cmd
from minivcs.cli.commands.diff import changes_cmd, show_cmd, diff_cmd
from minivcs.cli.commands.tree import tree_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'log_cmd',
           'changes_cmd', 'show_cmd', 'diff_cmd', 'tree_cmd']

"""Command line argument handling package."""

from flacfolders.ui.cli.args.options import OrganizeArgs
from flacfolders.ui.cli.args.parser import ArgumentParser, expand_arguments

__all__ = ["ArgumentParser", "OrganizeArgs", "expand_arguments"]

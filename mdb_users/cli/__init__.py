"""
Command line interface for MDB_USERS.
"""

import click

from .. import __version__
from .commands.serve import serve


@click.group()
@click.version_option(__version__, prog_name="mdb-users")
def cli() -> None:
    """MDB Users - user records over MongoDB."""


cli.add_command(serve)

__all__ = ["cli"]

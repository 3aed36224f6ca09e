# Copyright: 2000-2002 Juergen Hermann <jh@web.de>
# Copyright: 2006,2011 MoinMoin:ThomasWaldmann
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect CLI - Extension Script Package
"""

import click

from flask.cli import FlaskGroup

from viewprotect.app import create_app
from viewprotect.cli.maint import tables, protect

from viewprotect import log

logging = log.getLogger(__name__)


def Help():
    """ViewProtect initial help"""
    print(
        """\
Quick help / most important commands overview:

  viewprotect create-tables   # Create the restriction and audit log tables

  viewprotect protect         # Restrict an action on a page to a group

  viewprotect show            # Show the restrictions of a page

  viewprotect run             # Run the builtin web server

For more information please run:

  viewprotect --help

  viewprotect <subcommand> --help
"""
    )


@click.group(cls=FlaskGroup, create_app=create_app, invoke_without_command=True)
@click.pass_context
def cli(ctx):
    """ViewProtect extensions to the Flask CLI"""
    logging.debug("invoked_subcommand: %s", ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        Help()


@cli.command("help", help="Quick help")
def _Help():
    Help()


cli.add_command(tables.cli_CreateTables)
cli.add_command(tables.cli_DestroyTables)

cli.add_command(protect.cli_Protect)
cli.add_command(protect.cli_Unprotect)
cli.add_command(protect.cli_Show)
cli.add_command(protect.cli_Check)
cli.add_command(protect.cli_Log)


if __name__ == "__main__":
    cli()

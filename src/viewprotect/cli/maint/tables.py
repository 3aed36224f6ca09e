# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect CLI - create / destroy the restriction and audit log tables.
"""

import click

from flask import current_app as app
from flask.cli import FlaskGroup

from viewprotect.app import create_app

from viewprotect import log

logging = log.getLogger(__name__)


@click.group(cls=FlaskGroup, create_app=create_app)
def cli():
    pass


@cli.command("create-tables", help="Create the restriction and audit log tables")
def cli_CreateTables():
    logging.info("Creating tables")
    app.store.create()
    logging.info("Tables created")


@cli.command("destroy-tables", help="Drop the restriction and audit log tables, removing all restrictions")
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
def cli_DestroyTables(yes):
    if not yes:
        click.confirm("All restrictions and the audit log will be lost. Continue?", abort=True)
    logging.info("Dropping tables")
    app.store.destroy()
    logging.info("Tables dropped")

# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect CLI - show and change restrictions of pages and files.
"""

import click

from flask import current_app as app
from flask.cli import FlaskGroup

from viewprotect.app import create_app
from viewprotect.constants.rights import READ
from viewprotect.error import InvalidArgument
from viewprotect.user import User

from viewprotect import log

logging = log.getLogger(__name__)

CLI_USER = "ViewProtectCLI"


@click.group(cls=FlaskGroup, create_app=create_app)
def cli():
    pass


def _title(name):
    title = app.titles.from_text(name)
    if not title.exists:
        raise click.BadParameter(f"{name} does not exist.", param_hint="--page")
    return title


@cli.command("protect", help="Restrict an action on a page to one or more groups")
@click.option("--page", "-p", required=True, type=str, help="Name of the page, File:name for files.")
@click.option("--action", "-a", required=False, type=str, default=READ, help="Action to restrict (default: read).")
@click.option("--group", "-g", "groups", required=True, multiple=True, help="Group allowed, may be given repeatedly.")
@click.option("--user", "-u", "username", required=False, default=CLI_USER, help="User name for the audit log.")
def cli_Protect(page, action, groups, username):
    title = _title(page)
    user = User(username)
    try:
        entries = app.viewprotect.set_action_protection(user, title, action, list(groups))
    except InvalidArgument as err:
        raise click.UsageError(str(err))
    logging.info(f"{action} on {title} restricted to {', '.join(groups)}, {len(entries)} changes logged")


@cli.command("unprotect", help="Remove restrictions of a page, of all actions if no --action is given")
@click.option("--page", "-p", required=True, type=str, help="Name of the page, File:name for files.")
@click.option("--action", "-a", required=False, type=str, default=None, help="Action to unrestrict.")
@click.option("--user", "-u", "username", required=False, default=CLI_USER, help="User name for the audit log.")
def cli_Unprotect(page, action, username):
    title = _title(page)
    user = User(username)
    try:
        if action:
            entries = app.viewprotect.set_action_protection(user, title, action, [])
        else:
            entries = app.viewprotect.clear_page_protections(user, title)
    except InvalidArgument as err:
        raise click.UsageError(str(err))
    logging.info(f"restrictions of {title} removed, {len(entries)} changes logged")


@cli.command("show", help="Show the restrictions of a page")
@click.option("--page", "-p", required=True, type=str, help="Name of the page, File:name for files.")
def cli_Show(page):
    title = _title(page)
    restrictions = app.viewprotect.get_page_restrictions(title)
    if not restrictions:
        click.echo(f"{title} is not restricted.")
    for action, groups in sorted(restrictions.items()):
        click.echo(f"{action}: {', '.join(groups)}")


@cli.command("check", help="Check whether a user may do an action on a page")
@click.option("--page", "-p", required=True, type=str, help="Name of the page, File:name for files.")
@click.option("--user", "-u", "username", required=True, help="User name.")
@click.option("--action", "-a", required=False, type=str, default=READ, help="Action (default: read).")
def cli_Check(page, username, action):
    title = app.titles.from_text(page)
    result = app.viewprotect.has_permission(title, User(username), action)
    if result:
        click.echo(f"{username} may {action} {title}.")
    else:
        click.echo(f"{username} may not {action} {title}, restricted to: {', '.join(result.groups)}.")


@cli.command("log", help="Show the most recent restriction changes")
@click.option("--page", "-p", required=False, type=str, default=None, help="Only changes of this page.")
@click.option("--limit", "-n", required=False, type=int, default=20, help="Number of entries (default: 20).")
def cli_Log(page, limit):
    page_id = _title(page).page_id if page else None
    for entry in app.audit_log.entries(page_id=page_id, limit=limit):
        click.echo(
            f"{entry.timestamp} {', '.join(entry.performers)} {entry.action} {entry.page_id}: "
            f"[{entry.old_groups}] -> [{entry.new_groups}]"
        )

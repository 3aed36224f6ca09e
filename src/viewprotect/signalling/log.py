# Copyright: 2010 MoinMoin:ThomasWaldmann
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    ViewProtect - logging signal handlers
"""


from .signals import ANY, protection_changed, access_denied
from flask import got_request_exception

from .. import log

logging = log.getLogger(__name__)


@protection_changed.connect_via(ANY)
def log_protection_changed(sender, entry, **kwargs):
    logging.info(
        f"{entry.performer} changed {entry.action} restriction of page {entry.page_id}: "
        f"[{entry.old_groups}] -> [{entry.new_groups}]"
    )


@access_denied.connect_via(ANY)
def log_access_denied(sender, title, user, action, groups, **kwargs):
    logging.info(f"{user} may not {action} {title}, restricted to: {', '.join(groups)}")


@got_request_exception.connect_via(ANY)
def log_exception(sender, exception, **extra):
    logging.exception(exception)

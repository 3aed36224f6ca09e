# Copyright: 2017, 2019 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - host hooks

The host wiki calls these functions from its authorization and rendering
paths. They work on the protection service of the current app.
"""


from flask import current_app as app

from viewprotect.constants.rights import READ
from viewprotect.constants.misc import GROUP_SEPARATOR
from viewprotect.i18n import _

from viewprotect import log

logging = log.getLogger(__name__)


def get_user_permissions_errors(title, user, action):
    """
    Called before content of title is served or changed.

    :returns: [] if user may do action on title, else the permission error:
              ["viewprotect-denied", group, ...] listing the groups having access.
    """
    result = app.viewprotect.has_permission(title, user, action)
    if result:
        return []
    return result.messages()


def before_page_display(title):
    """
    Called before title is rendered.

    :returns: dict indicator name -> message, one for every restricted
              indicator action (e.g. "viewprotect-read": "Restricted to: Editors")
    """
    indicators = {}
    if title is None:
        return indicators
    for action in app.cfg.viewprotect_indicator_actions:
        allowed = app.viewprotect.get_restricted_groups(title, action)
        if allowed:
            indicators[f"viewprotect-{action}"] = _("{action} restricted to: {groups}").format(
                action=action, groups=GROUP_SEPARATOR.join(allowed)
            )
    return indicators


def img_auth_before_stream(title, user, basename):
    """
    Called before a file gets streamed.

    :returns: None if user may read the file, else (path, error) where path is
              the image to stream instead and error the host's error message keys.
    """
    result = app.viewprotect.has_permission(title, user, READ)
    if result:
        return None
    logging.debug(f"not streaming {basename} to {user}")
    return app.cfg.viewprotect_denied_image, ["img-auth-accessdenied", "img-auth-badtitle", basename]

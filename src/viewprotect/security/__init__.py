# Copyright: 2000-2004 Juergen Hermann <jh@web.de>
# Copyright: 2003-2008,2011-2012 MoinMoin:ThomasWaldmann
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - permission checks

A page without restrictions for some action is open to everybody. If there
are restrictions, a user may do the action if they are a member of at least one of
the restricting groups. Users holding the manage capability (or being member
of the VIP group, if configured) are never restricted.
"""


from functools import wraps

from flask import current_app as app
from flask import g as flaskg
from flask import abort, request
from werkzeug.exceptions import Forbidden

from viewprotect import error
from viewprotect.constants.misc import DENIED_MESSAGE, GROUP_SEPARATOR
from viewprotect.constants.rights import MANAGE
from viewprotect.i18n import _
from viewprotect.signalling import access_denied

from viewprotect import log

logging = log.getLogger(__name__)


class Allowed:
    """The user may do the action."""

    def __bool__(self):
        return True

    def __eq__(self, other):
        return isinstance(other, Allowed)

    def __hash__(self):
        return hash(Allowed)

    def __repr__(self):
        return "Allowed"


ALLOWED = Allowed()


class Denied:
    """The user may not do the action, members of groups may."""

    def __init__(self, groups):
        self.groups = list(groups)

    def __bool__(self):
        return False

    def __eq__(self, other):
        return isinstance(other, Denied) and sorted(self.groups) == sorted(other.groups)

    def __hash__(self):
        return hash(tuple(sorted(self.groups)))

    def __repr__(self):
        return f"Denied({self.groups!r})"

    def messages(self):
        """Permission error in host notation: message key, then the qualifying groups."""
        return [DENIED_MESSAGE] + self.groups


class PermissionEvaluator:
    def __init__(self, cache, groups, manage_capability=MANAGE, vip_group=None):
        """
        :param cache: RestrictionCache
        :param groups: GroupMembership backend
        :param manage_capability: capability that bypasses all restrictions
        :param vip_group: members of this group bypass all restrictions
        """
        self.cache = cache
        self.groups = groups
        self.manage_capability = manage_capability
        self.vip_group = vip_group

    def may_manage(self, user):
        if self.groups.has_capability(user, self.manage_capability):
            return True
        return bool(self.vip_group) and self.groups.is_in_group(user, self.vip_group)

    def in_group(self, user, group):
        result = self.groups.is_in_group(user, group)
        logging.debug(f"{user} is in {group}: {'yes' if result else 'no'}")
        return result

    def has_permission(self, title, user, action):
        """
        May user do action on title?

        :returns: ALLOWED or Denied(groups)
        """
        if title is None:
            raise error.InvalidArgument("No title given for permission check.")
        if self.may_manage(user):
            return ALLOWED
        logging.debug(f"Checking for {user}/{title}/{action} ...")
        allowed_groups = self.cache.get_restricted_groups(title.page_id, action)
        if not allowed_groups:
            logging.debug(f"Result for {user}/{title}/{action}: everyone allowed")
            return ALLOWED
        for group in allowed_groups:
            if self.in_group(user, group):
                logging.debug(f"Result for {user}/{title}/{action}: ok")
                return ALLOWED
        logging.debug(f"Result for {user}/{title}/{action}: no")
        access_denied.send(self, title=title, user=user, action=action, groups=allowed_groups)
        return Denied(allowed_groups)


class AccessDenied(Forbidden):
    """
    403 response for a restricted page, listing the groups having access.
    """

    def __init__(self, title, action, groups):
        self.title = title
        self.action = action
        self.groups = list(groups)
        description = _("You may not {action} {title}, it is restricted to members of: {groups}.").format(
            action=action, title=title, groups=GROUP_SEPARATOR.join(self.groups)
        )
        super().__init__(description=description)


def require_permission(capability):
    """
    view decorator to require a specific capability

    if the capability is not held, abort with 403
    """

    def wrap(f):
        @wraps(f)
        def wrapped_f(*args, **kw):
            viewprotect = app.viewprotect
            if capability == viewprotect.evaluator.manage_capability:
                has_permission = viewprotect.evaluator.may_manage(flaskg.user)
            else:
                has_permission = viewprotect.groups.has_capability(flaskg.user, capability)
            if not has_permission:
                abort(403)
            return f(*args, **kw)

        return wrapped_f

    return wrap


def protected(action, name_arg="item_name"):
    """
    view decorator checking restrictions of the item named by the view argument
    name_arg (or the "title" query argument) before the view runs.

    if the current user is denied, abort with 403 listing the qualifying groups
    """

    def wrap(f):
        @wraps(f)
        def wrapped_f(*args, **kw):
            name = kw.get(name_arg) or request.args.get("title")
            if not name:
                abort(404)
            title = app.titles.from_text(name)
            result = app.viewprotect.has_permission(title, flaskg.user, action)
            if not result:
                raise AccessDenied(title, action, result.groups)
            return f(*args, **kw)

        return wrapped_f

    return wrap

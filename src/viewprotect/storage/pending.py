# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - pending restriction changes

Staged changes are kept as page_id -> permission -> group -> [user name, ...]
until they get flushed. Staging the same group again for a page / permission
just records the additional user, staging another group adds that group.

Staging NO_GROUP records the permission as touched without adding a group,
so flushing it leaves that permission unrestricted.

Every change is also recorded for its owner (e.g. the thread serving a
request), so discard(owner) drops what one request left unflushed without
touching changes staged by others.
"""

from viewprotect import error
from viewprotect.constants.misc import NO_GROUP, MIN_PAGE_ID, GROUP_SEPARATOR
from viewprotect.constants.rights import PROTECTABLE_ACTIONS


def _append_new(names, name):
    if name not in names:
        names.append(name)


class PendingWriteBuffer:
    def __init__(self, actions=PROTECTABLE_ACTIONS):
        self.actions = list(actions)
        self._changes = {}
        # owner -> [(page_id, action, group, user name), ...]
        self._staged_by = {}

    def __len__(self):
        return len(self._changes)

    def __bool__(self):
        return bool(self._changes)

    def __contains__(self, page_id):
        return page_id in self._changes

    def validate(self, page_id, action, group):
        if isinstance(page_id, bool) or not isinstance(page_id, int) or page_id < MIN_PAGE_ID:
            raise error.InvalidArgument(f"Page id {page_id!r} does not identify an existing page.")
        if action not in self.actions:
            raise error.InvalidArgument(
                "Action {!r} can't be restricted, valid actions are: {}.".format(action, ", ".join(self.actions))
            )
        if group is None:
            group = NO_GROUP
        if not isinstance(group, str) or GROUP_SEPARATOR.strip() in group:
            raise error.InvalidArgument(f"Invalid group name {group!r}.")
        return group.strip()

    def stage(self, user, page_id, action, group, owner=None):
        """
        Record that user wants action on page_id to be restricted to group.

        :param group: group name, None or NO_GROUP to only mark the action as changed
        :param owner: hashable key the change can be discarded by
        """
        group = self.validate(page_id, action, group)
        users = self._changes.setdefault(page_id, {}).setdefault(action, {}).setdefault(group, [])
        _append_new(users, str(user))
        self._staged_by.setdefault(owner, []).append((page_id, action, group, str(user)))

    def page_ids(self):
        return list(self._changes)

    def snapshot(self):
        """
        Return a copy of the staged changes.
        """
        return {
            page_id: {
                action: {group: list(users) for group, users in groups.items()} for action, groups in actions.items()
            }
            for page_id, actions in self._changes.items()
        }

    def clear(self):
        self._changes = {}
        self._staged_by = {}

    def discard(self, owner):
        """
        Drop the changes staged by owner, keep the ones of all other owners.

        :returns: number of dropped stagings
        """
        dropped = self._staged_by.pop(owner, [])
        kept = {change for changes in self._staged_by.values() for change in changes}
        for change in dropped:
            if change in kept:
                continue
            page_id, action, group, name = change
            actions = self._changes.get(page_id, {})
            groups = actions.get(action, {})
            users = groups.get(group, [])
            if name in users:
                users.remove(name)
            if not users:
                groups.pop(group, None)
            if not groups:
                actions.pop(action, None)
            if not actions:
                self._changes.pop(page_id, None)
        return len(dropped)

    def stagers(self, page_id, action):
        """
        Return names of users who staged changes for page_id / action, in staging order.
        """
        return action_stagers(self._changes.get(page_id, {}).get(action, {}))

    def page_stagers(self, page_id):
        return page_stagers(self._changes.get(page_id, {}))


def action_stagers(groups):
    names = []
    for users in groups.values():
        for name in users:
            _append_new(names, name)
    return names


def page_stagers(actions):
    names = []
    for groups in actions.values():
        for name in action_stagers(groups):
            _append_new(names, name)
    return names

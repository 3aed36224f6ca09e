# Copyright: 2017-2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - the protection service

Ties together the restriction store, the restriction cache, the pending
changes buffer, the permission evaluator and the audit log.

Changes are staged first and written by flush(). A flush replaces the complete
restrictions of every page it touches (permissions not staged for such a page
are dropped) within one transaction and writes one audit log entry for every
(page, permission) whose group set changed.

One instance serves the whole process; a single lock serializes cache fills,
staging and flushing. The flush transaction is exclusive, so flushes of other
processes sharing the database read the restrictions only after ours committed.
"""

import threading
from datetime import datetime, timezone

from viewprotect import error
from viewprotect.constants.misc import NO_GROUP, GROUP_SEPARATOR
from viewprotect.constants.rights import PROTECTABLE_ACTIONS, MANAGE, READ
from viewprotect.datastructures import ensure_membership_backend
from viewprotect.security import PermissionEvaluator
from viewprotect.signalling import protection_changed
from viewprotect.storage import RestrictionCache, PendingWriteBuffer, AuditLogEntry
from viewprotect.storage.pending import action_stagers, page_stagers

from viewprotect import log

logging = log.getLogger(__name__)


def join_groups(groups):
    """
    Canonical string form of a group set, as used in the audit log.
    """
    return GROUP_SEPARATOR.join(sorted({group for group in groups if group}))


def diff_restrictions(old, new, staged, timestamp=None):
    """
    Compare restrictions before and after a flush.

    :param old: page_id -> permission -> groups, before the flush
    :param new: page_id -> permission -> groups, after the flush
    :param staged: page_id -> permission -> group -> user names, the flushed changes
    :returns: list of AuditLogEntry, one per changed (page, permission)
    """
    timestamp = timestamp or datetime.now(timezone.utc)
    entries = []
    for page_id, staged_actions in staged.items():
        old_actions = old.get(page_id, {})
        new_actions = new.get(page_id, {})
        actions = list(old_actions) + [action for action in new_actions if action not in old_actions]
        for action in actions:
            old_groups = join_groups(old_actions.get(action, []))
            new_groups = join_groups(new_actions.get(action, []))
            if old_groups == new_groups:
                continue
            if action in staged_actions:
                performers = action_stagers(staged_actions[action])
            else:
                # dropped as not staged, everybody changing this page caused that
                performers = page_stagers(staged_actions)
            entries.append(
                AuditLogEntry(
                    performer=performers[0],
                    action=action,
                    page_id=page_id,
                    old_groups=old_groups,
                    new_groups=new_groups,
                    performers=tuple(performers),
                    timestamp=timestamp,
                )
            )
    return entries


def _owner(owner):
    return threading.get_ident() if owner is None else owner


def _page_id(title):
    if title is None:
        raise error.InvalidArgument("No page given.")
    return title.page_id


class ViewProtect:
    def __init__(self, store, audit_log, groups, actions=PROTECTABLE_ACTIONS, manage_capability=MANAGE, vip_group=None):
        """
        :param store: RestrictionStore (opened)
        :param audit_log: AuditLog writing into the store's database
        :param groups: GroupMembership backend
        :param actions: actions that can be restricted
        :param manage_capability: capability bypassing restrictions
        :param vip_group: group bypassing restrictions (optional)
        """
        self.store = store
        self.audit_log = audit_log
        self.groups = ensure_membership_backend(groups)
        self.actions = list(actions)
        self._lock = threading.RLock()
        self.cache = RestrictionCache(store, lock=self._lock)
        self.pending = PendingWriteBuffer(self.actions)
        self.evaluator = PermissionEvaluator(self.cache, self.groups, manage_capability, vip_group)

    def has_permission(self, title, user, action):
        return self.evaluator.has_permission(title, user, action)

    def may_manage(self, user):
        return self.evaluator.may_manage(user)

    def get_restricted_groups(self, title, action=READ):
        """
        Return the groups action on title is restricted to, empty if it is unrestricted.
        """
        logging.debug(f"Checking {action} for {title}")
        return self.cache.get_restricted_groups(_page_id(title), action)

    def get_page_restrictions(self, title):
        return self.cache.get_page_restrictions(_page_id(title))

    def stage_page_protection(self, user, title, action, group, owner=None):
        """
        Stage restricting action on title to group (None: no group), done by user.

        Nothing gets written before flush(), which writes the changes of all owners.

        :param owner: key for discard_pending(), defaults to the current thread
        """
        if title is None or not title.exists:
            raise error.InvalidArgument(f"Can't protect {title}, it does not exist.")
        with self._lock:
            self.pending.stage(user, title.page_id, action, group, owner=_owner(owner))
        logging.debug(f"staged {action} on {title} for group {group!r} by {user}")

    def discard_pending(self, owner=None):
        """
        Drop the unflushed changes staged by owner (default: the current thread).

        :returns: number of dropped stagings
        """
        with self._lock:
            return self.pending.discard(_owner(owner))

    def flush(self):
        """
        Write all staged changes.

        :returns: list of AuditLogEntry written
        :raises StorageFailure: nothing was written, the staged changes are discarded
        """
        with self._lock:
            if not self.pending:
                logging.debug("flush: nothing staged")
                return []
            staged = self.pending.snapshot()
            self.pending.clear()
            page_ids = list(staged)
            new = {}
            try:
                with self.store.begin(exclusive=True) as conn:
                    old = self.store.select_pages(page_ids, conn=conn)
                    self.store.delete_pages(conn, page_ids)
                    for page_id, actions in staged.items():
                        page = new.setdefault(page_id, {})
                        for action, groups in actions.items():
                            for group in groups:
                                if group == NO_GROUP:
                                    continue
                                self.store.insert(conn, page_id, action, group)
                                page.setdefault(action, []).append(group)
                    entries = diff_restrictions(old, new, staged)
                    for entry in entries:
                        self.audit_log.insert(conn, entry)
            except error.StorageFailure:
                logging.error(f"flush of pages {page_ids!r} failed, no restriction was changed")
                raise
            for page_id in page_ids:
                self.cache.replace(page_id, new[page_id])
        logging.debug(f"flushed pages {page_ids!r}, {len(entries)} changes")
        for entry in entries:
            protection_changed.send(self, entry=entry)
        return entries

    def _stage_and_flush(self, user, title, changes):
        if title is None or not title.exists:
            raise error.InvalidArgument(f"Can't protect {title}, it does not exist.")
        for action, group in changes:
            self.pending.validate(title.page_id, action, group)
        with self._lock:
            for action, group in changes:
                self.stage_page_protection(user, title, action, group)
            return self.flush()

    def set_page_protection(self, user, title, actions, group):
        """
        Restrict actions on title to group (None: unrestrict) and flush.

        Like all flushes, this drops restrictions of title for other actions.
        """
        return self._stage_and_flush(user, title, [(action, group) for action in actions])

    def set_action_protection(self, user, title, action, groups):
        """
        Restrict action on title to groups (empty: unrestrict) and flush, keeping
        the restrictions of title for other actions.
        """
        with self._lock:
            changes = [
                (other_action, other_group)
                for other_action, other_groups in self.get_page_restrictions(title).items()
                if other_action != action and other_action in self.actions
                for other_group in other_groups
            ]
            changes += [(action, group) for group in groups or [NO_GROUP]]
            return self._stage_and_flush(user, title, changes)

    def clear_page_protections(self, user, title):
        """
        Remove all restrictions of title.
        """
        with self._lock:
            if not self.get_page_restrictions(title):
                return []
            return self._stage_and_flush(user, title, [(action, NO_GROUP) for action in self.actions])

# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - restriction cache

Read-through cache over the restriction store, keyed by page id. The first
lookup for a page reads all its restrictions in one query; from then on the
cached entry is the complete restriction set of that page until a flush
replaces it or the cache gets cleared.
"""

import threading

from viewprotect.constants.misc import MIN_PAGE_ID

from viewprotect import log

logging = log.getLogger(__name__)


class RestrictionCache:
    def __init__(self, store, lock=None):
        """
        :param store: RestrictionStore
        :param lock: lock serializing the check-then-fill sequence
        """
        self.store = store
        self._lock = lock if lock is not None else threading.RLock()
        self._pages = {}  # page_id -> {permission: [group, ...]}

    def __contains__(self, page_id):
        return page_id in self._pages

    def _lookup(self, page_id):
        with self._lock:
            try:
                return self._pages[page_id]
            except KeyError:
                pass
            logging.debug(f"cache miss for page {page_id}")
            restrictions = self.store.select_pages([page_id]).get(page_id, {})
            self._pages[page_id] = restrictions
            return restrictions

    def get_page_restrictions(self, page_id):
        """
        Return a dict permission -> list of groups for page_id.

        Pages that do not exist (page_id 0 or None) have no restrictions,
        storage is not asked about them.
        """
        if not page_id or page_id < MIN_PAGE_ID:
            return {}
        return {permission: list(groups) for permission, groups in self._lookup(page_id).items()}

    def get_restricted_groups(self, page_id, action):
        """
        Return the groups that may do action on page_id, in storage order.

        An empty list means that action is not restricted for that page.
        """
        if not page_id or page_id < MIN_PAGE_ID:
            return []
        return [group for group in self._lookup(page_id).get(action, []) if group]

    def replace(self, page_id, restrictions):
        """
        Set the complete restrictions of page_id, e.g. after a flush wrote them.
        """
        with self._lock:
            self._pages[page_id] = {permission: list(groups) for permission, groups in restrictions.items()}

    def invalidate(self, page_ids):
        with self._lock:
            for page_id in page_ids:
                self._pages.pop(page_id, None)

    def clear(self):
        with self._lock:
            self._pages = {}

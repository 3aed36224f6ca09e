# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - restriction cache tests
"""


import pytest

from viewprotect.storage import RestrictionCache


@pytest.fixture
def queries(store, monkeypatch):
    """record the page ids of every select_pages call"""
    calls = []
    select_pages = store.select_pages

    def counting_select_pages(page_ids, conn=None):
        calls.append(list(page_ids))
        return select_pages(page_ids, conn=conn)

    monkeypatch.setattr(store, "select_pages", counting_select_pages)
    return calls


@pytest.fixture
def filled_store(store):
    with store.begin() as conn:
        store.insert(conn, 1, "read", "editors")
        store.insert(conn, 1, "read", "reviewers")
        store.insert(conn, 1, "edit", "sysop")
    return store


class TestRestrictionCache:
    def test_read_through_once(self, filled_store, queries):
        cache = RestrictionCache(filled_store)
        assert 1 not in cache
        assert sorted(cache.get_restricted_groups(1, "read")) == ["editors", "reviewers"]
        assert cache.get_restricted_groups(1, "edit") == ["sysop"]
        assert cache.get_restricted_groups(1, "upload") == []
        assert cache.get_page_restrictions(1)["edit"] == ["sysop"]
        assert queries == [[1]]
        assert 1 in cache

    def test_unrestricted_page_cached(self, filled_store, queries):
        cache = RestrictionCache(filled_store)
        assert cache.get_restricted_groups(7, "read") == []
        assert cache.get_page_restrictions(7) == {}
        assert queries == [[7]]

    @pytest.mark.parametrize("page_id", [0, None, -3])
    def test_nonexistent_page(self, filled_store, queries, page_id):
        cache = RestrictionCache(filled_store)
        assert cache.get_restricted_groups(page_id, "read") == []
        assert cache.get_page_restrictions(page_id) == {}
        assert queries == []

    def test_returns_copies(self, filled_store):
        cache = RestrictionCache(filled_store)
        cache.get_page_restrictions(1)["edit"].append("everybody")
        cache.get_restricted_groups(1, "edit").append("everybody")
        assert cache.get_restricted_groups(1, "edit") == ["sysop"]

    def test_replace(self, filled_store, queries):
        cache = RestrictionCache(filled_store)
        cache.replace(1, {"read": ["staff"]})
        assert cache.get_page_restrictions(1) == {"read": ["staff"]}
        assert queries == []

    def test_invalidate_and_clear(self, filled_store, queries):
        cache = RestrictionCache(filled_store)
        cache.get_page_restrictions(1)
        cache.invalidate([1])
        cache.get_page_restrictions(1)
        cache.clear()
        cache.get_page_restrictions(1)
        assert queries == [[1], [1], [1]]

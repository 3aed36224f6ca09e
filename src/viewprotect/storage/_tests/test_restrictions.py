# Copyright: 2011 MoinMoin:RonnyPfannschmidt
# Copyright: 2011 MoinMoin:ThomasWaldmann
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - restriction store tests
"""


import pytest

from viewprotect import error
from viewprotect.storage import RestrictionStore


def test_create_and_destroy(tmpdir):
    dbfile = tmpdir.join("viewprotect.sqlite")
    assert not dbfile.check()
    store = RestrictionStore(f"sqlite:///{dbfile!s}")
    assert not dbfile.check()
    store.create()
    assert dbfile.check()
    store.open()
    with store.begin() as conn:
        store.insert(conn, 1, "read", "editors")
    assert list(store) == [(1, "read", "editors")]
    store.close()
    store.destroy()


def test_from_uri(tmpdir):
    store = RestrictionStore.from_uri("sqlite://%s::test_base" % tmpdir)
    assert store.db_uri == "sqlite://%s" % tmpdir
    assert store.table_name == "test_base"


def test_in_memory():
    assert RestrictionStore().in_memory
    assert RestrictionStore("sqlite://").in_memory
    assert not RestrictionStore("sqlite:////tmp/restrictions.db").in_memory


class TestRestrictionStore:
    def test_empty(self, store):
        assert list(store) == []
        assert store.select_pages([1, 2]) == {}
        assert store.select_pages([]) == {}

    def test_select_pages(self, store):
        with store.begin() as conn:
            store.insert(conn, 1, "read", "editors")
            store.insert(conn, 1, "read", "reviewers")
            store.insert(conn, 1, "upload", "staff")
            store.insert(conn, 2, "edit", "sysop")
            store.insert(conn, 3, "read", "staff")
        result = store.select_pages([1, 2])
        assert sorted(result) == [1, 2]
        assert sorted(result[1]["read"]) == ["editors", "reviewers"]
        assert result[1]["upload"] == ["staff"]
        assert result[2] == {"edit": ["sysop"]}

    def test_insert_is_idempotent(self, store):
        with store.begin() as conn:
            store.insert(conn, 1, "read", "editors")
            store.insert(conn, 1, "read", "editors")
        with store.begin() as conn:
            store.insert(conn, 1, "read", "editors")
        assert list(store) == [(1, "read", "editors")]

    def test_delete_pages(self, store):
        with store.begin() as conn:
            store.insert(conn, 1, "read", "editors")
            store.insert(conn, 1, "edit", "editors")
            store.insert(conn, 2, "read", "staff")
        with store.begin() as conn:
            store.delete_pages(conn, [1])
        assert list(store) == [(2, "read", "staff")]

    def test_rollback(self, store):
        """a failing transaction leaves nothing behind and raises StorageFailure"""
        with pytest.raises(error.StorageFailure):
            with store.begin() as conn:
                store.insert(conn, 1, "read", "editors")
                # duplicate primary key
                conn.execute(store.table.insert().values(page=1, permission="read", grp="editors"))
        assert list(store) == []

    def test_select_in_transaction(self, store):
        with store.begin() as conn:
            store.insert(conn, 5, "read", "editors")
            assert store.select_pages([5], conn=conn) == {5: {"read": ["editors"]}}


def test_exclusive_transaction_blocks_writers(tmpdir):
    # a short busy timeout, the second writer gives up instead of waiting
    db_uri = "sqlite:///{}?timeout=0.1".format(tmpdir.join("viewprotect.sqlite"))
    first, second = RestrictionStore(db_uri), RestrictionStore(db_uri)
    first.create()
    first.open()
    second.open()
    with first.begin(exclusive=True) as conn:
        first.insert(conn, 1, "read", "editors")
        with pytest.raises(error.StorageFailure):
            with second.begin(exclusive=True) as conn2:
                second.insert(conn2, 1, "read", "staff")
        # readers still see the last committed state
        assert list(second) == []
    assert list(second) == [(1, "read", "editors")]
    second.close()
    first.close()
    first.destroy()

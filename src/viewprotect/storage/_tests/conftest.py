# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - storage test fixtures
"""


import pytest

from viewprotect.storage import create_simple_stores


@pytest.fixture
def stores():
    store, audit_log = create_simple_stores()
    store.open()
    store.create()
    yield store, audit_log
    store.destroy()
    store.close()


@pytest.fixture
def store(stores):
    return stores[0]


@pytest.fixture
def audit_log(stores):
    return stores[1]

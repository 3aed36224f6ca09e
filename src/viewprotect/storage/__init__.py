# Copyright: 2011 MoinMoin:ThomasWaldmann
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - storage

restrictions: the durable (page, permission, group) table
audit: the audit log of effective restriction changes
cache: process-lifetime read-through cache over the restrictions table
pending: staged, not yet flushed restriction changes
"""


from viewprotect.storage.restrictions import RestrictionStore  # noqa
from viewprotect.storage.audit import AuditLog, AuditLogEntry, SQLAuditLog  # noqa
from viewprotect.storage.cache import RestrictionCache  # noqa
from viewprotect.storage.pending import PendingWriteBuffer  # noqa


def create_simple_stores(db_uri=None, table_name="viewprotect", log_table_name="viewprotect_log"):
    """
    Create a restriction store and an audit log sharing the same database.

    :param db_uri: sqlalchemy database uri, None means an in-memory sqlite db
    :returns: (store, audit_log)
    """
    store = RestrictionStore(db_uri, table_name)
    audit_log = SQLAuditLog(store, log_table_name)
    return store, audit_log

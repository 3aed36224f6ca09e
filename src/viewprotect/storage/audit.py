# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - audit log

One entry gets written per (page, permission) whose effective group set was
changed by a flush. Entries are written within the flush transaction.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone

from sqlalchemy import select, Table, Column, Integer, String, Text, DateTime

from viewprotect.storage.restrictions import PERMISSION_LEN, GROUP_LEN
from viewprotect.constants.misc import GROUP_SEPARATOR


def _utc(timestamp):
    # sqlite gives back naive datetimes, timestamps are always stored in UTC
    if timestamp is not None and timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp


@dataclass
class AuditLogEntry:
    performer: str
    action: str
    page_id: int
    old_groups: str
    new_groups: str
    # everybody who staged a change leading to this entry, performer first
    performers: tuple = ()
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not self.performers:
            self.performers = (self.performer,)


class AuditLog(ABC):
    @abstractmethod
    def insert(self, conn, entry):
        """
        Store entry, using conn (a connection of the running flush transaction).
        """

    @abstractmethod
    def entries(self, page_id=None, limit=50):
        """
        Return the most recent entries (optionally only for page_id), newest first.
        """


class SQLAuditLog(AuditLog):
    """
    Audit log in a table of the restriction store's database.
    """

    def __init__(self, store, table_name="viewprotect_log"):
        self.store = store
        self.table_name = table_name
        self.table = Table(
            table_name,
            store.metadata,
            Column("id", Integer, primary_key=True, autoincrement=True),
            Column("timestamp", DateTime(timezone=True)),
            Column("performer", String(GROUP_LEN)),
            Column("performers", Text),
            Column("action", String(PERMISSION_LEN)),
            Column("page", Integer, index=True),
            Column("old_groups", Text),
            Column("new_groups", Text),
        )

    def insert(self, conn, entry):
        conn.execute(
            self.table.insert().values(
                timestamp=entry.timestamp.astimezone(timezone.utc),
                performer=entry.performer,
                performers=GROUP_SEPARATOR.join(entry.performers),
                action=entry.action,
                page=entry.page_id,
                old_groups=entry.old_groups,
                new_groups=entry.new_groups,
            )
        )

    def entries(self, page_id=None, limit=50):
        t = self.table
        query = select(t).order_by(t.c.id.desc()).limit(limit)
        if page_id is not None:
            query = query.where(t.c.page == page_id)
        with self.store.begin() as conn:
            rows = conn.execute(query).mappings().fetchall()
        return [
            AuditLogEntry(
                performer=row["performer"],
                action=row["action"],
                page_id=row["page"],
                old_groups=row["old_groups"],
                new_groups=row["new_groups"],
                performers=tuple(row["performers"].split(GROUP_SEPARATOR)) if row["performers"] else (),
                timestamp=_utc(row["timestamp"]),
            )
            for row in rows
        ]

# Copyright: 2011 MoinMoin:ThomasWaldmann
# Copyright: 2026 ViewProtect project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
ViewProtect - restriction store

Stores (page, permission, group) triples into any database supported by
sqlalchemy. A row means "group may perform permission on page", no row for
some (page, permission) means unrestricted access.

This is pure persistence, the policy lives in viewprotect.protection.
"""

import os
from contextlib import contextmanager

from sqlalchemy import create_engine, event, select, MetaData, Table, Column, Integer, String
from sqlalchemy.pool import StaticPool
from sqlalchemy.exc import SQLAlchemyError

from viewprotect import error

from viewprotect import log

logging = log.getLogger(__name__)

PERMISSION_LEN = 32
GROUP_LEN = 255

# execution option marking a transaction that must hold the write lock from its start
EXCLUSIVE = "viewprotect_exclusive"


def _sqlite_connect(dbapi_connection, connection_record):
    # pysqlite only starts a transaction before the first write, _sqlite_begin starts it instead
    dbapi_connection.isolation_level = None


def _sqlite_begin(conn):
    if conn.get_execution_options().get(EXCLUSIVE):
        # reserve the database before reading, other writers wait until we commit
        conn.exec_driver_sql("BEGIN IMMEDIATE")
    else:
        conn.exec_driver_sql("BEGIN")


class RestrictionStore:
    """
    The viewprotect table.
    """

    @classmethod
    def from_uri(cls, uri):
        """
        Create a new cls instance from the given uri.

        :param uri: db_uri::table_name where table_name is optional
        """
        # using "::" to support windows pathnames that
        # may include ":" after the drive letter.
        params = uri.split("::")
        return cls(*params)

    def __init__(self, db_uri=None, table_name="viewprotect", verbose=False):
        """
        :param db_uri: The database uri that we pass on to SQLAlchemy.
                       May contain user/password/host/port/etc.
                       None gives a (non-persistent) in-memory sqlite database.
        :param table_name: name of the restrictions table
        :param verbose: If set to True this will log all SQL queries.
        """
        self.db_uri = db_uri
        self.verbose = verbose
        self.engine = None
        self.table_name = table_name
        if db_uri and db_uri.startswith("sqlite:///"):
            db_path = os.path.dirname(self.db_uri.split("sqlite:///")[1])
            if db_path and not os.path.exists(db_path):
                os.makedirs(db_path)
        self.metadata = MetaData()
        self.table = Table(
            self.table_name,
            self.metadata,
            Column("page", Integer, primary_key=True, autoincrement=False),
            Column("permission", String(PERMISSION_LEN), primary_key=True),
            Column("grp", String(GROUP_LEN), primary_key=True),
        )

    @property
    def in_memory(self):
        return self.db_uri is None or self.db_uri in ("sqlite://", "sqlite:///:memory:")

    def open(self):
        if self.engine is not None:
            return
        if self.in_memory:
            # an in-memory sqlite db only lives as long as its connection, so all
            # users must share one connection.
            self.engine = create_engine(
                "sqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False}, echo=self.verbose
            )
        else:
            self.engine = create_engine(self.db_uri, echo=self.verbose, echo_pool=self.verbose)
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _sqlite_connect)
            event.listen(self.engine, "begin", _sqlite_begin)

    def close(self):
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None

    @contextmanager
    def _opened(self):
        # the in-memory db would be gone after close(), so keep it open
        opened = self.engine is None
        self.open()
        try:
            yield self.engine
        finally:
            if opened and not self.in_memory:
                self.close()

    def create(self):
        """
        Create the tables of this store (and of everything sharing its metadata).
        """
        with self._opened():
            with self.begin() as conn:
                self.metadata.create_all(conn)
        logging.info(f"created table {self.table_name}")

    def destroy(self):
        with self._opened():
            with self.begin() as conn:
                self.metadata.drop_all(conn)
        logging.info(f"dropped table {self.table_name}")

    @contextmanager
    def begin(self, exclusive=False):
        """
        Context manager giving a connection within one atomic transaction.

        The transaction gets committed if the block finishes normally and is
        rolled back if it raises. Database errors are raised as StorageFailure.

        :param exclusive: serialize the transaction against all other writers,
                          also those of other processes. sqlite takes the write
                          lock at BEGIN, other databases run it SERIALIZABLE
                          (a conflicting writer makes it fail, nothing is written).
        """
        try:
            with self.engine.connect() as conn:
                if exclusive:
                    if self.engine.dialect.name == "sqlite":
                        conn.execution_options(**{EXCLUSIVE: True})
                    else:
                        conn.execution_options(isolation_level="SERIALIZABLE")
                with conn.begin():
                    yield conn
        except SQLAlchemyError as err:
            logging.error(f"transaction on {self.table_name} rolled back: {err}")
            raise error.StorageFailure(f"Restriction store transaction failed: {err}")

    @contextmanager
    def _connection(self, conn):
        if conn is not None:
            yield conn
        else:
            with self.begin() as conn:
                yield conn

    def select_pages(self, page_ids, conn=None):
        """
        Read the complete restrictions of some pages in one query.

        :param page_ids: list of page ids
        :param conn: connection of a running transaction (optional)
        :returns: dict page_id -> dict permission -> list of groups (storage order),
                  pages without restrictions are not contained.
        """
        result = {}
        page_ids = list(page_ids)
        if not page_ids:
            return result
        t = self.table
        query = select(t.c.page, t.c.permission, t.c.grp).distinct().where(t.c.page.in_(page_ids))
        with self._connection(conn) as conn:
            try:
                rows = conn.execute(query).fetchall()
            except SQLAlchemyError as err:
                raise error.StorageFailure(f"Reading restrictions of pages {page_ids!r} failed: {err}")
        for page_id, permission, group in rows:
            groups = result.setdefault(page_id, {}).setdefault(permission, [])
            if group not in groups:
                groups.append(group)
        return result

    def delete_pages(self, conn, page_ids):
        """
        Delete all restrictions of some pages.
        """
        t = self.table
        for page_id in page_ids:
            conn.execute(t.delete().where(t.c.page == page_id))

    def insert(self, conn, page_id, permission, group):
        """
        Add a restriction. Adding an existing restriction does nothing.
        """
        t = self.table
        exists = conn.execute(
            select(t.c.page).where(t.c.page == page_id, t.c.permission == permission, t.c.grp == group)
        ).first()
        if exists is None:
            conn.execute(t.insert().values(page=page_id, permission=permission, grp=group))

    def __iter__(self):
        """
        Iterate over all (page, permission, group) triples.
        """
        t = self.table
        with self.begin() as conn:
            rows = conn.execute(select(t.c.page, t.c.permission, t.c.grp).order_by(t.c.page)).fetchall()
        for row in rows:
            yield tuple(row)

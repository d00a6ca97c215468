# Copyright (c) 2024 Refcheck Contributors
# SPDX-License-Identifier: MIT

"""SQLite-backed reference index store

The sys_refindex table is maintained by the external index-maintenance
process. This store only reads file references and removes single
entries by hash. Every call opens its own connection and commits on its
own, so one removal never depends on another.
"""
import logging
import sqlite3
from typing import Dict, List, Optional
from urllib.request import pathname2url

from value_objects import FILE_REFERENCE_TABLE, ReferenceEntry

logger = logging.getLogger(__name__)

_COLUMNS = (
    'hash', 'tablename', 'recuid', 'field', 'flexpointer', 'softref_key',
    'softref_id', 'sorting', 'deleted', 'workspace', 'ref_table', 'ref_uid',
    'ref_string',
)


class SqliteReferenceStore:
    """Reference index store with injectable db_path

    Example:
        store = SqliteReferenceStore(db_path="/app/data/refindex.db")
        managed = store.query_file_references(softref_present=False)
        error = store.clear_reference_value(managed[0].hash)
    """

    def __init__(self, db_path: str, busy_timeout_ms: int = 5000):
        """Initialize store with database path

        Args:
            db_path: Path to SQLite database file
            busy_timeout_ms: How long to wait for locks held by the indexer
        """
        self.db_path = db_path
        self.busy_timeout_ms = busy_timeout_ms

    def _connect(self, create: bool = False) -> sqlite3.Connection:
        """Open a connection that tolerates the indexer writing concurrently

        Only ensure_schema may create the database file; everything else
        fails on a missing file instead of leaving an empty one behind.
        """
        if create:
            conn = sqlite3.connect(self.db_path)
        else:
            conn = sqlite3.connect(f"file:{pathname2url(str(self.db_path))}?mode=rw", uri=True)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute(f"PRAGMA busy_timeout={int(self.busy_timeout_ms)}")
        return conn

    def ensure_schema(self) -> None:
        """Create sys_refindex if it does not exist yet"""
        conn = self._connect(create=True)
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS sys_refindex (
                    hash TEXT PRIMARY KEY,
                    tablename TEXT NOT NULL DEFAULT '',
                    recuid INTEGER NOT NULL DEFAULT 0,
                    field TEXT NOT NULL DEFAULT '',
                    flexpointer TEXT NOT NULL DEFAULT '',
                    softref_key TEXT,
                    softref_id TEXT NOT NULL DEFAULT '',
                    sorting INTEGER NOT NULL DEFAULT 0,
                    deleted INTEGER NOT NULL DEFAULT 0,
                    workspace INTEGER NOT NULL DEFAULT 0,
                    ref_table TEXT NOT NULL DEFAULT '',
                    ref_uid INTEGER NOT NULL DEFAULT 0,
                    ref_string TEXT NOT NULL DEFAULT ''
                )
            """)
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_refindex_ref_table ON sys_refindex (ref_table)"
            )
            conn.commit()
        finally:
            conn.close()

    def add_reference(
        self,
        hash: str,
        tablename: str,
        recuid: int,
        field: str,
        ref_string: str,
        ref_table: str = FILE_REFERENCE_TABLE,
        flexpointer: str = "",
        softref_key: Optional[str] = None,
        deleted: bool = False,
        **extra
    ) -> None:
        """Insert or replace one index row

        Used by index maintenance tooling and fixtures; reconciliation
        itself never adds references.
        """
        row = {
            'hash': hash,
            'tablename': tablename,
            'recuid': recuid,
            'field': field,
            'flexpointer': flexpointer,
            'softref_key': softref_key,
            'deleted': int(deleted),
            'ref_table': ref_table,
            'ref_string': ref_string,
        }
        row.update({k: v for k, v in extra.items() if k in _COLUMNS})
        columns = ', '.join(row)
        placeholders = ', '.join('?' * len(row))

        conn = self._connect()
        try:
            conn.execute(
                f"INSERT OR REPLACE INTO sys_refindex ({columns}) VALUES ({placeholders})",
                list(row.values())
            )
            conn.commit()
        finally:
            conn.close()

    def query_file_references(self, softref_present: bool) -> List[ReferenceEntry]:
        """Get all file references, either soft or managed ones

        An empty softref_key counts as absent.

        Args:
            softref_present: True for soft references, False for managed ones

        Returns:
            ReferenceEntry list in index order
        """
        if softref_present:
            condition = "softref_key IS NOT NULL AND softref_key != ''"
        else:
            condition = "(softref_key IS NULL OR softref_key = '')"

        conn = self._connect()
        try:
            cursor = conn.execute(f"""
                SELECT hash, tablename, recuid, field, flexpointer,
                       softref_key, deleted, ref_string
                FROM sys_refindex
                WHERE ref_table = ? AND {condition}
                ORDER BY rowid
            """, (FILE_REFERENCE_TABLE,))
            return [ReferenceEntry.from_row(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def clear_reference_value(self, hash: str) -> Optional[str]:
        """Remove the reference identified by hash

        Returns:
            None on success, otherwise an error message
        """
        try:
            conn = self._connect()
        except sqlite3.Error as e:
            return str(e)

        try:
            cursor = conn.execute("DELETE FROM sys_refindex WHERE hash = ?", (hash,))
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            return str(e)
        finally:
            conn.close()

        if cursor.rowcount == 0:
            return f'No reference record with hash "{hash}" was found!'
        logger.debug(f"Cleared reference {hash}")
        return None

    def count_references(self) -> Dict[str, int]:
        """Count file references by kind"""
        conn = self._connect()
        try:
            row = conn.execute("""
                SELECT
                    COUNT(*) AS total,
                    SUM(CASE WHEN ref_table = ? THEN 1 ELSE 0 END) AS files,
                    SUM(CASE WHEN ref_table = ? AND softref_key IS NOT NULL
                             AND softref_key != '' THEN 1 ELSE 0 END) AS soft_files
                FROM sys_refindex
            """, (FILE_REFERENCE_TABLE, FILE_REFERENCE_TABLE)).fetchone()
        finally:
            conn.close()

        files = row['files'] or 0
        soft_files = row['soft_files'] or 0
        return {
            'total': row['total'] or 0,
            'file_references': files,
            'managed_file_references': files - soft_files,
            'soft_file_references': soft_files,
        }

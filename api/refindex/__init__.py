"""Reference index (sys_refindex) access.

- SqliteReferenceStore: reads file references and clears single entries
- Index refreshers: ask the index-maintenance service for a rebuild
"""
from refindex.reference_store import SqliteReferenceStore
from refindex.index_refresher import HttpIndexRefresher, NullIndexRefresher

__all__ = ['SqliteReferenceStore', 'HttpIndexRefresher', 'NullIndexRefresher']

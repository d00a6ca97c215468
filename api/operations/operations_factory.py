"""
Operations factory for the missing-files reconciliation.

Single place where collaborators are built from configuration;
everything below it receives them through constructors.
"""
import logging

from config import default_config
from operations.existence_prober import FileExistenceProber
from operations.missing_files_reconciler import MissingFilesReconciler
from refindex.index_refresher import HttpIndexRefresher, NullIndexRefresher
from refindex.reference_store import SqliteReferenceStore

logger = logging.getLogger(__name__)


class OperationsFactory:
    """Factory for reconciliation operations.

    Usage:
        reconciler = OperationsFactory.create_reconciler()
        result = reconciler.run_reconciliation(dry_run=True)
    """

    @staticmethod
    def create_reference_store(config=None) -> SqliteReferenceStore:
        """Create the reference index store

        Args:
            config: Full Config (uses default_config if None)
        """
        config = config or default_config
        return SqliteReferenceStore(
            config.database.path,
            busy_timeout_ms=config.database.busy_timeout_ms
        )

    @staticmethod
    def create_index_refresher(config=None):
        """Create the refresher for the configured update endpoint"""
        config = config or default_config
        if not config.refindex.update_url:
            return NullIndexRefresher()
        return HttpIndexRefresher(
            config.refindex.update_url,
            timeout=config.refindex.update_timeout
        )

    @staticmethod
    def create_reconciler(config=None) -> MissingFilesReconciler:
        """Create a MissingFilesReconciler wired from configuration"""
        config = config or default_config
        logger.debug(f"Reconciling {config.database.path} against {config.paths.content_root}")
        return MissingFilesReconciler(
            store=OperationsFactory.create_reference_store(config),
            prober=FileExistenceProber(config.paths.content_root),
            index_refresher=OperationsFactory.create_index_refresher(config),
        )

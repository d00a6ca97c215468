# Copyright (c) 2024 Refcheck Contributors
# SPDX-License-Identifier: MIT

"""Missing files reconciliation

Finds file references in the reference index whose file is gone:
1. Optionally refresh the reference index (results depend on it being current)
2. Read soft and managed file references
3. Check each target against the content root
4. Remove managed references to missing files (unless dry run)
5. Return everything found and done

Soft references (e.g. <img src="..."> in content) are only reported;
fixing them needs an editor.
"""
import logging

from operations.existence_prober import FileExistenceProber
from operations.errors import IndexRefreshFailed
from operations.reference_classifier import ReferenceClassifier
from operations.reference_reader import ReferenceIndexReader
from operations.repair_executor import RepairExecutor
from value_objects import ReconciliationResult

logger = logging.getLogger(__name__)


class MissingFilesReconciler:
    """Reconciles the reference index against the filesystem

    Example:
        reconciler = MissingFilesReconciler(store, FileExistenceProber("/var/www"))
        result = reconciler.run_reconciliation(dry_run=True)
        for line in result.missing_soft_references:
            print(line)
    """

    def __init__(self, store, prober: FileExistenceProber, index_refresher=None):
        """Initialize with injected collaborators

        Args:
            store: Reference index store (query_file_references, clear_reference_value)
            prober: Answers exists(relative_path)
            index_refresher: Optional object with refresh(); None disables refreshing
        """
        self.reader = ReferenceIndexReader(store)
        self.classifier = ReferenceClassifier(prober)
        self.executor = RepairExecutor(store)
        self.index_refresher = index_refresher

    def run_reconciliation(
        self,
        dry_run: bool = False,
        refresh_index_first: bool = False
    ) -> ReconciliationResult:
        """Find references to missing files and remove the managed ones

        Args:
            dry_run: If True, report what would be removed without modifying
            refresh_index_first: Ask the index maintainer for an update first

        Returns:
            ReconciliationResult for this run

        Raises:
            StoreUnavailable: the reference index could not be read
        """
        refreshed = self._refresh_index(refresh_index_first)

        soft_entries = self.reader.find_soft_file_references()
        managed_entries = self.reader.find_managed_file_references()

        missing_soft = self.classifier.classify_soft(soft_entries)
        missing_managed = self.classifier.classify_managed(managed_entries)
        if missing_soft:
            logger.info(f"Found {len(missing_soft)} soft-referenced files that need manual repair")
        if missing_managed:
            logger.info(f"Found {len(missing_managed)} missing files with managed references")

        outcomes = self.executor.repair_all(missing_managed, dry_run=dry_run)

        return ReconciliationResult(
            dry_run=dry_run,
            index_refreshed=refreshed,
            missing_soft_references=missing_soft,
            missing_managed_references=missing_managed,
            repair_outcomes=outcomes,
        )

    def _refresh_index(self, requested: bool) -> bool:
        """Run the optional index refresh; failures do not stop the run"""
        if not requested or self.index_refresher is None:
            logger.info("Reference index is assumed to be up to date, continuing.")
            return False
        try:
            self.index_refresher.refresh()
        except IndexRefreshFailed as e:
            logger.warning(f"{e}; continuing with the current reference index")
            return False
        except Exception as e:
            logger.warning(f"Reference index update raised {e.__class__.__name__}: {e}; "
                           f"continuing with the current reference index")
            return False
        return True

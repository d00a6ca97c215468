# Copyright (c) 2024 Refcheck Contributors
# SPDX-License-Identifier: MIT

"""Removes references to missing files from the reference index

Each removal is its own unit of work: a failing entry is recorded and
the batch moves on. Nothing is retried.
"""
import logging
from typing import Dict, Iterable, List

from operations.errors import RepairFailed
from value_objects import ReferenceEntry, RepairOutcome

logger = logging.getLogger(__name__)


class RepairExecutor:
    """Clears managed references, or reports what it would clear

    Example:
        executor = RepairExecutor(store)
        outcomes = executor.repair_all(candidates, dry_run=True)
    """

    def __init__(self, store):
        self.store = store

    def repair_all(
        self,
        candidates: Dict[str, Dict[str, ReferenceEntry]],
        dry_run: bool
    ) -> List[RepairOutcome]:
        """Repair every group of the candidate map in order"""
        outcomes = []
        for target_path, entries in candidates.items():
            outcomes.extend(self.repair(target_path, entries, dry_run))
        return outcomes

    def repair(
        self,
        target_path: str,
        entries,
        dry_run: bool
    ) -> List[RepairOutcome]:
        """Handle all references pointing at one missing file

        Args:
            target_path: The missing file
            entries: {hash: ReferenceEntry} or an iterable of entries
            dry_run: If True, only report what would be removed
        """
        logger.debug(f"Deleting references to missing file \"{target_path}\"")
        outcomes = []
        for entry in self._unique_entries(entries):
            if dry_run:
                outcomes.append(RepairOutcome.would_remove(target_path, entry))
                continue
            outcomes.append(self._repair_one(target_path, entry))
        return outcomes

    def _repair_one(self, target_path: str, entry: ReferenceEntry) -> RepairOutcome:
        """Clear one reference, capturing any failure"""
        try:
            self._clear(entry)
        except RepairFailed as e:
            logger.error(f"Removing reference {e.hash} in record "
                         f"\"{entry.record_descriptor}\" failed: {e.message}")
            return RepairOutcome.failure(target_path, entry, e.message)

        logger.info(f"Removed reference in record \"{entry.record_descriptor}\"")
        return RepairOutcome.success(target_path, entry)

    def _clear(self, entry: ReferenceEntry) -> None:
        """Call the store mutation, normalising both failure styles"""
        try:
            error = self.store.clear_reference_value(entry.hash)
        except Exception as e:
            raise RepairFailed(entry.hash, str(e) or e.__class__.__name__) from e
        if error:
            raise RepairFailed(entry.hash, str(error))

    @staticmethod
    def _unique_entries(entries) -> Iterable[ReferenceEntry]:
        """Yield entries once per hash"""
        if isinstance(entries, dict):
            entries = entries.values()
        seen = set()
        for entry in entries:
            if entry.hash in seen:
                continue
            seen.add(entry.hash)
            yield entry

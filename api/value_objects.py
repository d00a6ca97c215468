# Copyright (c) 2024 Refcheck Contributors
# SPDX-License-Identifier: MIT

"""
Value objects for the reference index reconciler.

Principles:
- Immutable data structures
- Named instead of primitive types (no Primitive Obsession)
- Small, focused classes with single responsibility
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

# ref_table value marking a reference whose target is a file
FILE_REFERENCE_TABLE = "_FILE"


@dataclass(frozen=True)
class ReferenceEntry:
    """One row of the reference index pointing at a file.

    Replaces passing raw sys_refindex rows (dicts) around.
    An entry is a soft reference when softref_key is non-empty.
    """
    hash: str
    source_table: str
    source_record_id: int
    source_field: str
    target_path: str
    flex_pointer: str = ""
    softref_key: Optional[str] = None
    is_deleted_record: bool = False

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> 'ReferenceEntry':
        """Create an entry from a sys_refindex row."""
        return cls(
            hash=row['hash'],
            source_table=row['tablename'],
            source_record_id=row['recuid'],
            source_field=row['field'],
            target_path=row['ref_string'] or "",
            flex_pointer=row['flexpointer'] or "",
            softref_key=row['softref_key'],
            is_deleted_record=bool(row['deleted']),
        )

    @property
    def is_soft(self) -> bool:
        """Check if this is a soft (content-scanned) reference."""
        return bool(self.softref_key)

    @property
    def record_descriptor(self) -> str:
        """Readable owner of the reference: table:uid:field:flexpointer:softref_key"""
        descriptor = ':'.join([
            self.source_table,
            str(self.source_record_id),
            self.source_field,
            self.flex_pointer,
            self.softref_key or "",
        ])
        if self.is_deleted_record:
            descriptor += " (DELETED)"
        return descriptor

    @property
    def soft_reference_descriptor(self) -> str:
        """Descriptor listed for a missing soft-referenced file."""
        return f"{self.target_path} - {self.hash} - {self.record_descriptor}"


@dataclass(frozen=True)
class RepairOutcome:
    """Result of handling one repair candidate.

    Replaces tuple returns like (hash, ok, error).
    """
    hash: str
    target_path: str
    record: str
    removed: bool
    dry_run: bool
    error: Optional[str] = None

    @classmethod
    def would_remove(cls, target_path: str, entry: ReferenceEntry) -> 'RepairOutcome':
        """Create a report-only outcome for a dry run."""
        return cls(hash=entry.hash, target_path=target_path,
                   record=entry.record_descriptor, removed=False, dry_run=True)

    @classmethod
    def success(cls, target_path: str, entry: ReferenceEntry) -> 'RepairOutcome':
        """Create an outcome for a removed reference."""
        return cls(hash=entry.hash, target_path=target_path,
                   record=entry.record_descriptor, removed=True, dry_run=False)

    @classmethod
    def failure(cls, target_path: str, entry: ReferenceEntry, error: str) -> 'RepairOutcome':
        """Create an outcome for a failed removal."""
        return cls(hash=entry.hash, target_path=target_path,
                   record=entry.record_descriptor, removed=False, dry_run=False,
                   error=error)

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def succeeded(self) -> bool:
        return self.removed and self.error is None


@dataclass
class ReconciliationResult:
    """Everything one reconciliation run found and did.

    Built fresh per run, discarded after reporting.
    """
    dry_run: bool
    index_refreshed: bool = False
    missing_soft_references: List[str] = field(default_factory=list)
    missing_managed_references: Dict[str, Dict[str, ReferenceEntry]] = field(default_factory=dict)
    repair_outcomes: List[RepairOutcome] = field(default_factory=list)

    @property
    def managed_reference_count(self) -> int:
        """Number of distinct managed references to missing files."""
        return sum(len(entries) for entries in self.missing_managed_references.values())

    @property
    def repaired_count(self) -> int:
        return sum(1 for outcome in self.repair_outcomes if outcome.succeeded)

    @property
    def failed_repairs(self) -> List[RepairOutcome]:
        return [outcome for outcome in self.repair_outcomes if outcome.failed]

    @property
    def has_missing_files(self) -> bool:
        return bool(self.missing_soft_references or self.missing_managed_references)

    @property
    def message(self) -> str:
        """One-line summary of the run"""
        if not self.has_missing_files:
            return "Nothing to do, no missing files found. Everything is in place."

        parts = []
        if self.missing_soft_references:
            parts.append(
                f"{len(self.missing_soft_references)} soft-referenced files need manual repair"
            )
        if self.missing_managed_references:
            count = self.managed_reference_count
            if self.dry_run:
                parts.append(f"would remove {count} references to missing files")
            else:
                parts.append(f"removed {self.repaired_count} of {count} references to missing files")
        if self.failed_repairs:
            parts.append(f"{len(self.failed_repairs)} removals failed")
        return "; ".join(parts)

# Copyright (c) 2024 Refcheck Contributors
# SPDX-License-Identifier: MIT

"""Turns a ReconciliationResult into report lines and API payloads"""
from typing import Any, Dict, List

from value_objects import ReconciliationResult


class MissingFilesReporter:
    """Formats reconciliation results for the CLI and the API"""

    def __init__(self, result: ReconciliationResult):
        self.result = result

    def soft_reference_lines(self) -> List[str]:
        return list(self.result.missing_soft_references)

    def managed_reference_groups(self) -> Dict[str, List[str]]:
        """{missing file: [record descriptor, ...]}"""
        return {
            path: [entry.record_descriptor for entry in entries.values()]
            for path, entries in self.result.missing_managed_references.items()
        }

    def repair_lines(self, verbose: bool = False) -> List[str]:
        """Lines in the order repairs were attempted"""
        lines = []
        current_path = None
        for outcome in self.result.repair_outcomes:
            if verbose and outcome.target_path != current_path:
                current_path = outcome.target_path
                lines.append(f'Deleting references to missing file "{current_path}"')
            lines.append(f'Removing reference in record "{outcome.record}"')
            if outcome.failed:
                lines.append(f'ReferenceIndex reported "{outcome.error}"')
        return lines

    def to_dict(self) -> Dict[str, Any]:
        """Serializable summary"""
        result = self.result
        return {
            'dry_run': result.dry_run,
            'index_refreshed': result.index_refreshed,
            'missing_soft_references': self.soft_reference_lines(),
            'missing_managed_references': self.managed_reference_groups(),
            'managed_references_found': result.managed_reference_count,
            'references_removed': result.repaired_count,
            'outcomes': [
                {
                    'hash': o.hash,
                    'target_path': o.target_path,
                    'record': o.record,
                    'removed': o.removed,
                    'error': o.error,
                }
                for o in result.repair_outcomes
            ],
            'message': result.message,
        }

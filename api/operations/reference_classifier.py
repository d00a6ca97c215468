# Copyright (c) 2024 Refcheck Contributors
# SPDX-License-Identifier: MIT

"""Classifies file references by whether their target exists"""
import logging
from typing import Dict, Iterable, List

from value_objects import ReferenceEntry

logger = logging.getLogger(__name__)


class ReferenceClassifier:
    """Decides what happens to each file reference

    - target exists: ignored
    - soft reference, target missing: reported for manual repair
    - managed reference, target missing: repair candidate

    References from deleted records are kept; only the file matters.
    """

    def __init__(self, prober):
        self.prober = prober

    def classify_managed(
        self, entries: Iterable[ReferenceEntry]
    ) -> Dict[str, Dict[str, ReferenceEntry]]:
        """Group managed references to missing files by path, then by hash

        Returns:
            {target_path: {hash: entry}} in first-seen order
        """
        groups: Dict[str, Dict[str, ReferenceEntry]] = {}
        for entry in entries:
            groups.setdefault(entry.target_path, {}).setdefault(entry.hash, entry)

        missing = {
            path: group for path, group in groups.items()
            if not self.prober.exists(path)
        }
        logger.debug(f"{len(missing)} of {len(groups)} managed file targets are missing")
        return missing

    def classify_soft(self, entries: Iterable[ReferenceEntry]) -> List[str]:
        """Descriptors of soft references whose file is missing"""
        return [
            entry.soft_reference_descriptor for entry in entries
            if not self.prober.exists(entry.target_path)
        ]

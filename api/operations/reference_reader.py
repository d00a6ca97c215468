# Copyright (c) 2024 Refcheck Contributors
# SPDX-License-Identifier: MIT

"""Reads file references from the reference index"""
import logging
from typing import List

from operations.errors import StoreUnavailable
from value_objects import ReferenceEntry

logger = logging.getLogger(__name__)


class ReferenceIndexReader:
    """Splits file references into managed and soft ones

    Any failure of the underlying store is raised as StoreUnavailable,
    nothing is returned partially.
    """

    def __init__(self, store):
        self.store = store

    def find_managed_file_references(self) -> List[ReferenceEntry]:
        """File references created by typed relation fields (no softref_key)"""
        return self._query(softref_present=False)

    def find_soft_file_references(self) -> List[ReferenceEntry]:
        """File references found by soft reference parsers"""
        return self._query(softref_present=True)

    def _query(self, softref_present: bool) -> List[ReferenceEntry]:
        kind = 'soft' if softref_present else 'managed'
        try:
            entries = list(self.store.query_file_references(softref_present=softref_present))
        except Exception as e:
            raise StoreUnavailable(f"Could not read {kind} file references: {e}") from e
        logger.debug(f"Read {len(entries)} {kind} file references")
        return entries

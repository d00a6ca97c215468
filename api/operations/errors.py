# Copyright (c) 2024 Refcheck Contributors
# SPDX-License-Identifier: MIT

"""Errors raised by the missing-files reconciliation operations"""


class ReconciliationError(Exception):
    """Base class for reconciliation errors"""


class StoreUnavailable(ReconciliationError):
    """The reference index could not be read. Fatal for the whole run."""


class RepairFailed(ReconciliationError):
    """Clearing a single reference failed. Recovered per entry."""

    def __init__(self, hash: str, message: str):
        super().__init__(f"{hash}: {message}")
        self.hash = hash
        self.message = message


class IndexRefreshFailed(ReconciliationError):
    """The external reference index update could not be completed"""

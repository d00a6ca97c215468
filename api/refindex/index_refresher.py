# Copyright (c) 2024 Refcheck Contributors
# SPDX-License-Identifier: MIT

"""Reference index refresh collaborators

Rebuilding sys_refindex is owned by the index-maintenance service.
Reconciliation only asks for a refresh before scanning.
"""
import logging

import requests

from operations.errors import IndexRefreshFailed

logger = logging.getLogger(__name__)


class HttpIndexRefresher:
    """Requests a reference index update from the maintenance service

    Example:
        refresher = HttpIndexRefresher("http://cms:8080/refindex/update")
        refresher.refresh()
    """

    def __init__(self, url: str, timeout: float = 300.0):
        self.url = url
        self.timeout = timeout

    def refresh(self) -> None:
        """Trigger the update and wait for it to finish

        Raises:
            IndexRefreshFailed: service unreachable or returned an error status
        """
        logger.info(f"Updating reference index via {self.url}")
        try:
            resp = requests.post(self.url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise IndexRefreshFailed(f"Reference index update failed: {e}") from e
        logger.info("Reference index updated")


class NullIndexRefresher:
    """Used when no maintenance service is configured"""

    def refresh(self) -> None:
        raise IndexRefreshFailed("No reference index update endpoint configured "
                                 "(set REFINDEX_UPDATE_URL)")

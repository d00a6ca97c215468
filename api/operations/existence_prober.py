# Copyright (c) 2024 Refcheck Contributors
# SPDX-License-Identifier: MIT

"""Filesystem existence checks for referenced files"""
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class FileExistenceProber:
    """Answers whether a path relative to the content root is an existing file

    Permission and other OS errors count as "does not exist", so an
    unreadable file is flagged rather than silently skipped.

    Example:
        prober = FileExistenceProber(content_root="/var/www/site")
        prober.exists("fileadmin/logo.png")
    """

    def __init__(self, content_root: Union[str, Path]):
        self.content_root = Path(content_root)

    def exists(self, relative_path: str) -> bool:
        """Check if the referenced file is present on disk"""
        if not relative_path:
            return False
        path = self.content_root / relative_path.lstrip('/')
        try:
            return path.is_file()
        except (OSError, ValueError) as e:
            logger.debug(f"Treating {path} as missing: {e}")
            return False

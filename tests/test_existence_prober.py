# Copyright (c) 2024 Refcheck Contributors
# SPDX-License-Identifier: MIT

"""Tests for FileExistenceProber"""
from pathlib import Path
from unittest.mock import patch

from operations.existence_prober import FileExistenceProber


class TestFileExistenceProber:

    def test_existing_file(self, content_root, create_file):
        create_file("fileadmin/logo.png")
        assert FileExistenceProber(content_root).exists("fileadmin/logo.png") is True

    def test_missing_file(self, content_root):
        assert FileExistenceProber(content_root).exists("fileadmin/gone.png") is False

    def test_directory_is_not_a_file(self, content_root):
        (content_root / "uploads").mkdir()
        assert FileExistenceProber(content_root).exists("uploads") is False

    def test_empty_path(self, content_root):
        assert FileExistenceProber(content_root).exists("") is False

    def test_leading_slash_stays_below_content_root(self, content_root, create_file):
        create_file("fileadmin/logo.png")
        assert FileExistenceProber(content_root).exists("/fileadmin/logo.png") is True

    def test_accepts_string_root(self, content_root, create_file):
        create_file("a.txt")
        assert FileExistenceProber(str(content_root)).exists("a.txt") is True

    def test_permission_error_counts_as_missing(self, content_root):
        prober = FileExistenceProber(content_root)
        with patch.object(Path, 'is_file', side_effect=PermissionError("denied")):
            assert prober.exists("fileadmin/secret.pdf") is False

    def test_invalid_path_counts_as_missing(self, content_root):
        assert FileExistenceProber(content_root).exists("bad\x00name.jpg") is False

"""Tests for OperationsFactory wiring"""
from pathlib import Path

from config import Config, DatabaseConfig, PathConfig, RefindexConfig, LoggingConfig
from operations.missing_files_reconciler import MissingFilesReconciler
from operations.operations_factory import OperationsFactory
from refindex.index_refresher import HttpIndexRefresher, NullIndexRefresher


def _config(update_url=""):
    return Config(
        database=DatabaseConfig(path="/tmp/refindex-test.db", busy_timeout_ms=100),
        paths=PathConfig(content_root=Path("/tmp/site")),
        refindex=RefindexConfig(update_url=update_url, update_timeout=5.0),
        logging=LoggingConfig(),
    )


def test_reference_store_uses_database_config():
    store = OperationsFactory.create_reference_store(_config())
    assert store.db_path == "/tmp/refindex-test.db"
    assert store.busy_timeout_ms == 100


def test_null_refresher_without_url():
    assert isinstance(OperationsFactory.create_index_refresher(_config()), NullIndexRefresher)


def test_http_refresher_with_url():
    refresher = OperationsFactory.create_index_refresher(_config("http://cms/update"))
    assert isinstance(refresher, HttpIndexRefresher)
    assert refresher.url == "http://cms/update"
    assert refresher.timeout == 5.0


def test_reconciler_wiring():
    reconciler = OperationsFactory.create_reconciler(_config())
    assert isinstance(reconciler, MissingFilesReconciler)
    assert reconciler.classifier.prober.content_root == Path("/tmp/site")
    assert reconciler.reader.store is reconciler.executor.store

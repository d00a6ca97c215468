"""Route dependencies

Routes receive their collaborators through FastAPI's Depends, so tests
can swap them with app.dependency_overrides.
"""
from operations.missing_files_reconciler import MissingFilesReconciler
from operations.operations_factory import OperationsFactory
from refindex.reference_store import SqliteReferenceStore


def get_reconciler() -> MissingFilesReconciler:
    """Reconciler wired from default_config"""
    return OperationsFactory.create_reconciler()


def get_reference_store() -> SqliteReferenceStore:
    """Reference store wired from default_config"""
    return OperationsFactory.create_reference_store()

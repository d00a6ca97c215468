"""Operations layer for the reference index reconciler.

This package handles the reconciliation core:
- Existence probing (FileExistenceProber)
- Reference index reading (ReferenceIndexReader)
- Classification (ReferenceClassifier)
- Repair (RepairExecutor)
- Orchestration (MissingFilesReconciler)
- Reporting (MissingFilesReporter)

Principles:
- Single Responsibility Principle
- Dependency Injection
"""

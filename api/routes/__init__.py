"""Route handlers following Single Responsibility Principle

Each router module handles a single resource/concept:
- health: Health/monitoring endpoints
- maintenance: Reference index reconciliation
"""

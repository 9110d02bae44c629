"""
Data models for the Organization Manager.
"""

from org_manager.models.config import ManagerSettings
from org_manager.models.results import MigrationReport, TransferDirection, TransferResult

__all__ = [
    "ManagerSettings",
    "MigrationReport",
    "TransferDirection",
    "TransferResult",
]

"""
Organization Manager

A command-line plugin for moving applications between a personal account
and organization accounts, and for migrating whole teams into an organization.
"""

__version__ = "0.1.0"
__author__ = "Organization Manager Team"

from org_manager.models.config import ManagerSettings
from org_manager.models.results import MigrationReport, TransferDirection, TransferResult
from org_manager.orchestrator.transfer import TransferOrchestrator

__all__ = [
    "ManagerSettings",
    "MigrationReport",
    "TransferDirection",
    "TransferResult",
    "TransferOrchestrator",
]

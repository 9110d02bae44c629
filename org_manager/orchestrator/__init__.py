"""
Orchestrator module for the Organization Manager.
"""

from org_manager.orchestrator.transfer import TransferOrchestrator

__all__ = ["TransferOrchestrator"]

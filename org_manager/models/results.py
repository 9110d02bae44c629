"""
Result models for transfer operations.

A failed transfer request is a normal outcome, so the orchestrator returns
these instead of raising.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class TransferDirection(str, Enum):
    """Which way an app moves relative to an organization."""
    TO_ORGANIZATION = "to"
    FROM_ORGANIZATION = "from"


class TransferResult(BaseModel):
    """Outcome of a single app transfer request."""
    app: str
    organization: str
    direction: TransferDirection
    status_code: Optional[int] = None  # None when no response arrived
    body: str = ""
    succeeded: bool


class MigrationReport(BaseModel):
    """Outcome of migrating a team's apps into an organization."""
    team: str
    organization: str
    apps: List[str] = Field(default_factory=list)
    results: List[TransferResult] = Field(default_factory=list)

    @property
    def transferred(self) -> List[str]:
        return [r.app for r in self.results if r.succeeded]

    @property
    def failed(self) -> List[str]:
        return [r.app for r in self.results if not r.succeeded]

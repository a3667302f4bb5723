"""Dependency injection for API endpoints."""

from typing import Annotated

from fastapi import Depends

from md2resume.core.history import HistoryLedger, get_history_ledger
from md2resume.services.deployer import DeploymentService, get_deployment_service


async def get_ledger() -> HistoryLedger:
    """Get the deployment history ledger."""
    return get_history_ledger()


async def get_deployer() -> DeploymentService:
    """Get the deployment service."""
    return get_deployment_service()


# Type aliases for cleaner signatures
LedgerDep = Annotated[HistoryLedger, Depends(get_ledger)]
DeployerDep = Annotated[DeploymentService, Depends(get_deployer)]

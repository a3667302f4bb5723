"""Deployment history endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel

from md2resume.api.deps import LedgerDep
from md2resume.models.history import HistoryRecord

router = APIRouter()


class HistoryResponse(BaseModel):
    """Recent successful deployments, newest first."""

    success: bool = True
    history: list[HistoryRecord]
    total: int
    capacity: int


class ClearHistoryResponse(BaseModel):
    """Result of clearing the history."""

    success: bool = True
    cleared: int


@router.get("", response_model=HistoryResponse, summary="List deployment history")
async def get_history(ledger: LedgerDep) -> HistoryResponse:
    """Return the retained deployments."""
    records = ledger.list()
    return HistoryResponse(
        history=list(records),
        total=len(records),
        capacity=ledger.capacity,
    )


@router.delete("", response_model=ClearHistoryResponse, summary="Clear deployment history")
async def clear_history(ledger: LedgerDep) -> ClearHistoryResponse:
    """Forget all recorded deployments."""
    return ClearHistoryResponse(cleared=ledger.clear())

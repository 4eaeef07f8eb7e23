"""Owner-only history endpoints."""

from fastapi import APIRouter

from missive.api.dependencies import EngineDep
from missive.api.middleware.auth import CallerDep
from missive.api.models.messages import DeleteHistoryResponse, UpdateHistoryResponse
from missive.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/history")


@router.get("/updates", response_model=UpdateHistoryResponse)
async def get_update_history(caller: CallerDep, engine: EngineDep) -> UpdateHistoryResponse:
    """Return the full update ledger."""
    logger.debug("get_update_history_request", caller=caller)
    entries = engine.get_update_history(caller).unwrap() or []
    return UpdateHistoryResponse(items=entries, total=len(entries))


@router.get("/deletions", response_model=DeleteHistoryResponse)
async def get_delete_history(caller: CallerDep, engine: EngineDep) -> DeleteHistoryResponse:
    """Return the full delete ledger."""
    logger.debug("get_delete_history_request", caller=caller)
    entries = engine.get_delete_history(caller).unwrap() or []
    return DeleteHistoryResponse(items=entries, total=len(entries))

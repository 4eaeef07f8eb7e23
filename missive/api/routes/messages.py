"""Message CRUD endpoints.

Every mutation is answered from the engine's result: failures are
unwrapped into CrudOperationError and rendered by the global handler.
A mutation only takes effect once the engine snapshot has been written.
"""

from fastapi import APIRouter, Response

from missive.api.dependencies import EngineDep, SettingsDep, persisted
from missive.api.middleware.auth import CallerDep
from missive.api.models.messages import (
    MessageListResponse,
    MessageRequest,
    MessageResponse,
)
from missive.observability.logging import get_logger
from missive.records import IdentityKey

logger = get_logger(__name__)

router = APIRouter(prefix="/messages")


@router.post("", response_model=MessageResponse, status_code=201)
async def create_message(
    request: MessageRequest,
    caller: CallerDep,
    engine: EngineDep,
    settings: SettingsDep,
) -> MessageResponse:
    """Create the caller's message."""
    logger.info("create_message_request", caller=caller)

    with persisted(engine, settings):
        engine.create_message(caller, request.message).unwrap()

    return MessageResponse(sender=caller, message=request.message)


@router.get("", response_model=MessageListResponse)
async def read_all_messages(engine: EngineDep) -> MessageListResponse:
    """List every current message in roster order."""
    records = engine.read_all_messages().unwrap() or []
    items = [MessageResponse.from_record(r) for r in records]
    return MessageListResponse(items=items, total=len(items))


@router.get("/{sender}", response_model=MessageResponse)
async def read_message_from(sender: str, engine: EngineDep) -> MessageResponse:
    """Get the current message held by one sender."""
    message = engine.read_message_from(IdentityKey(sender)).unwrap()
    return MessageResponse(sender=sender, message=message)


@router.put("/me", response_model=MessageResponse)
async def update_message(
    request: MessageRequest,
    caller: CallerDep,
    engine: EngineDep,
    settings: SettingsDep,
) -> MessageResponse:
    """Replace the caller's message."""
    logger.info("update_message_request", caller=caller)

    with persisted(engine, settings):
        engine.update_message(caller, request.message).unwrap()

    return MessageResponse(sender=caller, message=request.message)


@router.delete("/me", status_code=204)
async def delete_message(
    caller: CallerDep,
    engine: EngineDep,
    settings: SettingsDep,
) -> Response:
    """Delete the caller's message."""
    logger.info("delete_message_request", caller=caller)

    with persisted(engine, settings):
        engine.delete_message(caller).unwrap()

    return Response(status_code=204)

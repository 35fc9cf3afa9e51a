from fastapi import APIRouter, Depends, Request

from cryptochat.routes.deps import get_chat_handler
from cryptochat.routes.schemas import ChatResponse, ErrorResponse
from cryptochat.services.chat_service import ChatRequestHandler

router = APIRouter(tags=["chat"])

CHAT_PATH = "/api/crypto-chat"


@router.post(
    CHAT_PATH,
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def crypto_chat(
    request: Request,
    handler: ChatRequestHandler = Depends(get_chat_handler),
) -> ChatResponse:
    """Relay one user message (plus recent history) to Claude."""
    body = await request.body()
    return await handler.handle(request.method, body)


# Other verbs go through the same handler so they get a JSON 405 instead of Starlette's default.
@router.api_route(
    CHAT_PATH,
    methods=["GET", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"],
    include_in_schema=False,
)
async def crypto_chat_method_not_allowed(
    request: Request,
    handler: ChatRequestHandler = Depends(get_chat_handler),
):
    return await handler.handle(request.method, b"")

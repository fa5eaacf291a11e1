from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from typing import Annotated

from .schemas import ChatRequest, ChatResponse
from .dependencies import get_relay
from src.core.constants import Messages
from src.relay.completion import CompletionRelay, ErrorKind


router = APIRouter(prefix="/api", tags=["Health Assistant"])

ERROR_RESPONSES = {
    ErrorKind.MISSING_INPUT: (status.HTTP_400_BAD_REQUEST, Messages.MISSING_INPUT),
    ErrorKind.PROVIDER_CALL_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR, Messages.PROVIDER_FAILED),
    ErrorKind.MALFORMED_PROVIDER_RESPONSE: (
        status.HTTP_500_INTERNAL_SERVER_ERROR, Messages.MALFORMED_RESPONSE),
}


@router.post(
    "/chat",
    response_model=ChatResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ChatResponse, "description": "userQuery missing or invalid body"},
        500: {"model": ChatResponse, "description": "Chat provider failed"},
    },
)
async def chat(
    relay: Annotated[CompletionRelay, Depends(get_relay)],
    request: ChatRequest | None = None,
):
    """
    Answer a health question, or return a refusal for off-topic queries.
    """
    if request is None:
        request = ChatRequest()

    result = await relay.respond(request.userQuery, request.lang)

    if result.ok:
        return ChatResponse(text=result.text)

    status_code, message = ERROR_RESPONSES[result.error]
    return JSONResponse(
        status_code=status_code,
        content=ChatResponse(error=message).model_dump(exclude_none=True),
    )

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, ValidationError as PydanticValidationError
import logging
from typing import Optional

from ..core.exceptions import ProxyError, UnexpectedError, ValidationError
from ..services.completion_service import CompletionService, get_completion_service

router = APIRouter(tags=["chat"])

logger = logging.getLogger("component_builder.chat")


class ChatRequest(BaseModel):
    message: Optional[str] = None


class ChatResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


async def _read_message(request: Request) -> str:
    try:
        payload = await request.json()
        body = ChatRequest.model_validate(payload)
    except (ValueError, PydanticValidationError) as e:
        raise ValidationError("Invalid request body", details=str(e))

    if not body.message:
        raise ValidationError("Message is required")
    return body.message


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat_proxy(
    request: Request,
    service: CompletionService = Depends(get_completion_service),
):
    """
    Forward one prompt to the completion API and relay the generated text.
    The credential check runs in the dependency, before the body is read.
    """
    message = await _read_message(request)
    try:
        content = await service.complete(message)
    except ProxyError:
        raise
    except Exception as e:
        logger.exception("Chat proxy failed")
        raise UnexpectedError(details=str(e))

    return ChatResponse(response=content)

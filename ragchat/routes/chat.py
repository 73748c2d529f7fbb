"""Grounded question answering endpoint."""

from typing import List

from fastapi import APIRouter, Depends, Request, Response
from pydantic import BaseModel, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError

from ragchat.errors import RAGError, UnknownError, ValidationError
from ragchat.prompts import MISSING_QUESTION
from ragchat.rag import RAGEngine

CHAT_PATH = "/api/chat"

router = APIRouter(tags=["chat"])


class ChatRequest(BaseModel):
    q: StrictStr = Field(min_length=1)


class ChatResponse(BaseModel):
    answer: str
    sources: List[str]


def get_rag_engine(request: Request) -> RAGEngine:
    return request.app.state.rag


async def parse_question(request: Request) -> str:
    try:
        body = await request.json()
    except ValueError:
        body = None

    try:
        return ChatRequest.model_validate(body if isinstance(body, dict) else {}).q
    except PydanticValidationError:
        raise ValidationError(MISSING_QUESTION) from None


@router.options(CHAT_PATH, include_in_schema=False)
async def chat_preflight():
    return Response(status_code=204)


@router.post(CHAT_PATH, response_model=ChatResponse)
async def chat(request: Request, rag: RAGEngine = Depends(get_rag_engine)):
    rag.require_credentials()
    question = await parse_question(request)

    try:
        return await rag.answer(question)
    except RAGError:
        raise
    except Exception as e:
        raise UnknownError(str(e) or type(e).__name__) from e

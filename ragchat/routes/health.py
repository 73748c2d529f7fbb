"""Liveness endpoint reporting corpus and cache state."""

from fastapi import APIRouter, Depends

from ragchat.rag import RAGEngine
from ragchat.routes.chat import get_rag_engine

router = APIRouter(tags=["health"])


@router.get("/api/health")
async def health(rag: RAGEngine = Depends(get_rag_engine)):
    return {
        "status": "ok",
        "documents": len(rag.index.documents),
        "cache_warm": rag.index.is_warm,
        "metrics": rag.metrics.get_stats(),
    }

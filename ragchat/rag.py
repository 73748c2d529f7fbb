"""Core RAG engine: query embedding, cached corpus embeddings, ranking and grounded generation."""

import asyncio
import logging
from typing import Dict, List, Optional, Sequence

import httpx
import numpy as np

from ragchat.config import Settings
from ragchat.corpus import Document, load_documents
from ragchat.embeddings import HFEmbeddingClient
from ragchat.errors import ConfigError, UpstreamError
from ragchat.generation import HFGenerationClient
from ragchat.logging_config import RequestMetrics, track_latency
from ragchat.prompts import MISSING_TOKEN, RAG_ANSWER_PROMPT
from ragchat.ranking import build_context, rank_documents

logger = logging.getLogger(__name__)


class DocumentIndex:
    """Corpus embeddings computed once and kept for the life of the process.

    ``vectors()[i]`` always belongs to ``documents[i]``. Concurrent cold callers
    share a single fill; a failed fill leaves the index cold.
    """

    def __init__(self, documents: Sequence[Document], metrics: Optional[RequestMetrics] = None):
        self.documents = tuple(documents)
        self.metrics = metrics or RequestMetrics()
        self._vectors: Optional[List[np.ndarray]] = None
        self._lock = asyncio.Lock()

    @property
    def is_warm(self) -> bool:
        return self._vectors is not None

    async def vectors(self, embedder: HFEmbeddingClient) -> List[np.ndarray]:
        if self._vectors is not None:
            return self._vectors

        async with self._lock:
            if self._vectors is None:
                with track_latency(f"rag.embed_corpus | documents={len(self.documents)}", logger) as timer:
                    self._vectors = await embedder.embed_many([d.text for d in self.documents])
                self.metrics.record_cache_fill(timer.elapsed_ms)
        return self._vectors

    def clear(self):
        self._vectors = None


class RAGEngine:
    def __init__(self, settings: Settings, http: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self.http = http or httpx.AsyncClient(timeout=settings.timeout_seconds)

        token = settings.hf_token or ""
        self.embedder = HFEmbeddingClient(
            self.http,
            token=token,
            model=settings.embeddings_model,
            api_base=settings.api_base,
        )
        self.generator = HFGenerationClient(
            self.http,
            token=token,
            model=settings.text_model,
            api_base=settings.api_base,
        )

        self.metrics = RequestMetrics()
        self.index = DocumentIndex(load_documents(settings.corpus_path), self.metrics)

        logger.info(
            f"RAGEngine initialized | documents={len(self.index.documents)} "
            f"| embeddings_model={settings.embeddings_model} | text_model={settings.text_model}"
        )

    async def close(self):
        await self.http.aclose()
        logger.info("RAGEngine resources closed")

    def require_credentials(self):
        if not self.settings.hf_token:
            raise ConfigError(MISSING_TOKEN)

    async def answer(self, question: str) -> Dict:
        self.require_credentials()
        logger.info(f"Query received | question_length={len(question)}")

        with track_latency("rag.answer", logger) as timer:
            try:
                result = await self._answer(question)
            except Exception as e:
                self.metrics.record_request(False, timer.stop(), isinstance(e, UpstreamError))
                raise
            self.metrics.record_request(True, timer.stop())
        return result

    async def _answer(self, question: str) -> Dict:
        query_vec = await self.embedder.embed(question)
        doc_vectors = await self.index.vectors(self.embedder)

        ranked = rank_documents(query_vec, self.index.documents, doc_vectors, self.settings.top_k)
        logger.info(
            "Retrieval complete | "
            + " ".join(f"{r.id}={r.score:.3f}" for r in ranked)
        )

        prompt = RAG_ANSWER_PROMPT.format(context=build_context(ranked), question=question)
        answer = await self.generator.generate(prompt)
        logger.info(f"LLM response received | answer_length={len(answer)}")

        return {"answer": answer, "sources": [r.id for r in ranked]}

"""Cosine-similarity ranking of the corpus against a query vector."""

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from ragchat.corpus import Document

EPSILON = 1e-9


@dataclass(frozen=True)
class RankedDocument:
    id: str
    text: str
    score: float


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    # mismatched lengths compare the overlapping prefix only
    n = min(len(a), len(b))
    a = np.asarray(a[:n], dtype=np.float64)
    b = np.asarray(b[:n], dtype=np.float64)
    denom = np.linalg.norm(a) * np.linalg.norm(b) + EPSILON
    return float(np.dot(a, b) / denom)


def rank_documents(
    query_vec: np.ndarray,
    documents: Sequence[Document],
    doc_vectors: Sequence[np.ndarray],
    top_k: int = 4,
) -> List[RankedDocument]:
    if len(documents) != len(doc_vectors):
        raise ValueError(
            f"Corpus/embedding mismatch: {len(documents)} documents, {len(doc_vectors)} vectors"
        )

    scored = [
        RankedDocument(doc.id, doc.text, cosine_similarity(query_vec, vec))
        for doc, vec in zip(documents, doc_vectors)
    ]
    scored.sort(key=lambda r: r.score, reverse=True)
    return scored[:top_k]


def build_context(ranked: Sequence[RankedDocument]) -> str:
    return "\n\n".join(f"({r.id}) {r.text}" for r in ranked)

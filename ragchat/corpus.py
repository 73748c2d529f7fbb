"""Static knowledge base: ordered (id, text) documents kept in memory."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class Document:
    id: str
    text: str


DEFAULT_DOCUMENTS: Tuple[Document, ...] = (
    Document(
        "about",
        "Ingénieur consultant spécialisé en CCaaS (Contact Center as a Service), "
        "intégrations Salesforce (Service Cloud) et téléphonie cloud. Focalisé sur des "
        "architectures simples, SSO (Single Sign-On)/MFA (Multi-Factor Authentication), "
        "et performance.",
    ),
    Document(
        "experience-1",
        "Consultant CX chez Devoteam (2022–2025). Projets Suez/SAUR: Amazon Connect, "
        "Genesys Cloud, CTI Salesforce, BYOC (Bring Your Own Carrier), monitoring, "
        "réduction MTTR (Mean Time To Repair).",
    ),
    Document(
        "projects-1",
        "Déploiement Amazon Connect multi-régions: SVI maintenable, routage, intégration "
        "Salesforce, optimisation coûts-minutes et latence.",
    ),
    Document(
        "skills",
        "Compétences: Amazon Connect, Genesys Cloud, Salesforce Service Cloud, Open CTI, "
        "SBC (Session Border Controller), SIP (Session Initiation Protocol), "
        "KPI (Key Performance Indicator).",
    ),
)


def parse_documents(payload) -> Tuple[Document, ...]:
    if not isinstance(payload, list):
        raise ValueError("Corpus must be a JSON list of {id, text} objects")

    documents = []
    seen = set()
    for index, entry in enumerate(payload):
        if not isinstance(entry, dict):
            raise ValueError(f"Corpus entry {index} is not an object")
        doc_id = entry.get("id")
        text = entry.get("text")
        if not isinstance(doc_id, str) or not doc_id:
            raise ValueError(f"Corpus entry {index} has no string 'id'")
        if not isinstance(text, str) or not text.strip():
            raise ValueError(f"Corpus entry '{doc_id}' has no string 'text'")
        if doc_id in seen:
            raise ValueError(f"Duplicate corpus id '{doc_id}'")
        seen.add(doc_id)
        documents.append(Document(doc_id, text))

    if not documents:
        raise ValueError("Corpus is empty")
    return tuple(documents)


def load_documents(path: Optional[str] = None) -> Tuple[Document, ...]:
    """Return the corpus from a JSON file, or the built-in one when *path* is unset."""
    if not path:
        return DEFAULT_DOCUMENTS

    corpus_file = Path(path)
    if not corpus_file.exists():
        raise FileNotFoundError(f"Corpus file not found: {corpus_file}")

    with corpus_file.open(encoding="utf-8") as fh:
        return parse_documents(json.load(fh))

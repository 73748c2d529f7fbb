import json

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from ragchat.config import Settings
from ragchat.main import create_app

API_BASE = "https://hf.test"
EMBED_PATH = "/pipeline/feature-extraction/sentence-transformers/all-MiniLM-L6-v2"
GEN_PATH = "/models/google/flan-t5-base"


def keyword_vector(text):
    """Toy embedding: one axis per corpus topic plus a small shared bias."""
    lowered = text.lower()
    return [
        1.0 if "compétences" in lowered else 0.0,
        1.0 if "devoteam" in lowered else 0.0,
        1.0 if "déploiement" in lowered else 0.0,
        1.0 if "ingénieur" in lowered else 0.0,
        0.1,
    ]


def embed_side_effect(request):
    text = json.loads(request.content)["inputs"]
    return httpx.Response(200, json=[keyword_vector(text)])


@pytest.fixture
def settings():
    return Settings(hf_token="test-token", api_base=API_BASE)


@pytest.fixture
def hf_api():
    with respx.mock(base_url=API_BASE, assert_all_called=False) as mock:
        mock.post(EMBED_PATH, name="embed").mock(side_effect=embed_side_effect)
        mock.post(GEN_PATH, name="generate").mock(
            return_value=httpx.Response(200, json=[{"generated_text": "  Amazon Connect, Genesys Cloud.  "}])
        )
        yield mock


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture(name="keyword_vector")
def keyword_vector_fixture():
    return keyword_vector

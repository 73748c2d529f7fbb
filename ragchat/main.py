"""FastAPI application entrypoint with RAG engine lifecycle management."""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ragchat.config import Settings
from ragchat.errors import ConfigError, RAGError, ValidationError
from ragchat.logging_config import setup_logging
from ragchat.rag import RAGEngine
from ragchat.routes import chat_router, health_router
from ragchat.routes.chat import CHAT_PATH

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.rag = RAGEngine(settings)
        yield
        await app.state.rag.close()

    app = FastAPI(title="Portfolio RAG chat", lifespan=lifespan)

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
        # every method except POST and OPTIONS gets the usage hint as plain text
        if exc.status_code == 405 and request.url.path == CHAT_PATH:
            logger.warning(f"Rejected {request.method} on {CHAT_PATH}")
            return PlainTextResponse(
                "POST /api/chat", status_code=405, headers={"Allow": "POST, OPTIONS"}
            )
        return await http_exception_handler(request, exc)

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, err: ConfigError):
        logger.error(f"Configuration error on {request.url.path}: {err.message}")
        return JSONResponse(status_code=500, content={"error": err.message})

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, err: ValidationError):
        logger.warning(f"Rejected request on {request.url.path}: {err.message}")
        return JSONResponse(status_code=400, content={"error": err.message})

    @app.exception_handler(RAGError)
    async def rag_error_handler(request: Request, err: RAGError):
        logger.error(f"Error occurred on path {request.url.path}: {err.message}")
        return JSONResponse(status_code=500, content={"error": "Server error", "details": err.message})

    app.include_router(chat_router)
    app.include_router(health_router)
    return app


app = create_app()


def serve():
    import uvicorn

    uvicorn.run(
        "ragchat.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    serve()

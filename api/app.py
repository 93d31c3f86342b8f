# api/app.py
"""
FastAPI application factory
"""
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from agents.assistant.agent import AssistantAgent
from api.v1.router import api_router
from core.config import get_settings
from core.exceptions import ReadingValidationError

def create_app(assistant: Optional[AssistantAgent] = None, lifespan=None) -> FastAPI:
    """Create FastAPI application"""
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan
    )
    app.state.assistant = assistant

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    @app.exception_handler(ReadingValidationError)
    async def reading_validation_handler(request: Request, exc: ReadingValidationError):
        return JSONResponse(
            status_code=422,
            content={"success": False, "message": str(exc), "data": None, "offline": False}
        )

    # Include routers
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        return {
            "service": settings.api_title,
            "version": settings.api_version,
            "status": "healthy"
        }

    return app

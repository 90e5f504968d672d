"""
Focus Hub - Main Application Entry Point

Personal productivity backend: class timetable, tasks, notes, expenses,
budgets and AI-generated practice quizzes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from focus_hub import __version__
from focus_hub.core.config import Settings, get_settings
from focus_hub.core.logger import logger
from focus_hub.interfaces.auth_provider import IAuthProvider
from focus_hub.interfaces.llm_provider import ILLMProvider


def create_app(
    settings: Optional[Settings] = None,
    auth_provider: Optional[IAuthProvider] = None,
    llm_provider: Optional[ILLMProvider] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment
        auth_provider: Auth provider to use instead of ``AUTH_PROVIDER``
        llm_provider: LLM provider to use instead of the Gemini API
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown events."""
        from focus_hub.api.deps import build_auth_provider, build_llm_provider
        from focus_hub.infrastructure.local.database import Database

        # Startup
        logger.info(f"Starting Focus Hub in {settings.ENVIRONMENT} mode...")
        database = Database(settings.DATABASE_URL, echo=settings.DEBUG)
        await database.init()

        app.state.database = database
        app.state.auth_provider = auth_provider or build_auth_provider(settings)
        app.state.llm_provider = llm_provider or build_llm_provider(settings)

        yield

        # Shutdown
        logger.info("Shutting down Focus Hub...")
        await database.dispose()

    app = FastAPI(
        title="Focus Hub",
        description="Classes, tasks, notes, budgets and quizzes for students",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    # Include routers
    from focus_hub.api import budgets, classes, expenses, notes, quiz, tasks, users

    app.include_router(classes.router)
    app.include_router(tasks.router)
    app.include_router(notes.router)
    app.include_router(expenses.router)
    app.include_router(budgets.router)
    app.include_router(users.router)
    app.include_router(quiz.router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Focus hub is Running"

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "version": __version__,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "focus_hub.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )

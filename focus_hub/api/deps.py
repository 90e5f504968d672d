"""
Dependency injection for API endpoints.

Long-lived resources (database, auth provider, LLM provider) are created by
the application lifespan and stored on ``app.state``; the dependencies below
hand out per-request repositories and services built on top of them.
"""

from datetime import datetime
from typing import Annotated, Callable, Optional

from fastapi import Depends, Header, HTTPException, Query, Request, status

from focus_hub.api.errors import to_http_exception
from focus_hub.core.config import Settings
from focus_hub.core.exceptions import AuthenticationError, ForbiddenError
from focus_hub.core.logger import setup_logger
from focus_hub.infrastructure.local.budget_repository import SqliteBudgetRepository
from focus_hub.infrastructure.local.class_repository import SqliteClassRepository
from focus_hub.infrastructure.local.database import Database
from focus_hub.infrastructure.local.expense_repository import SqliteExpenseRepository
from focus_hub.infrastructure.local.note_repository import SqliteNoteRepository
from focus_hub.infrastructure.local.task_repository import SqliteTaskRepository
from focus_hub.infrastructure.local.user_repository import SqliteUserRepository
from focus_hub.interfaces.auth_provider import IAuthProvider, User
from focus_hub.interfaces.budget_repository import IBudgetRepository
from focus_hub.interfaces.class_repository import IClassRepository
from focus_hub.interfaces.expense_repository import IExpenseRepository
from focus_hub.interfaces.llm_provider import ILLMProvider
from focus_hub.interfaces.note_repository import INoteRepository
from focus_hub.interfaces.task_repository import ITaskRepository
from focus_hub.interfaces.user_repository import IUserRepository
from focus_hub.models.classes import ClassItem
from focus_hub.models.task import TaskItem
from focus_hub.services.note_service import NoteService
from focus_hub.services.quiz_service import QuizService
from focus_hub.services.schedule_service import ScheduleService
from focus_hub.utils.datetime_utils import now_utc

logger = setup_logger(__name__)


# ===========================================
# Provider Factories (used at startup)
# ===========================================


def build_auth_provider(settings: Settings) -> IAuthProvider:
    """Create the auth provider selected by ``AUTH_PROVIDER``."""
    if settings.AUTH_PROVIDER == "firebase":
        from focus_hub.infrastructure.auth.firebase_auth import FirebaseAuthProvider
        return FirebaseAuthProvider(settings)

    from focus_hub.infrastructure.local.mock_auth import MockAuthProvider
    if not settings.is_local:
        logger.warning("Mock authentication is enabled outside the local environment")
    return MockAuthProvider()


def build_llm_provider(settings: Settings) -> Optional[ILLMProvider]:
    """Create the Gemini provider, or None when no API key is configured."""
    if not settings.GOOGLE_API_KEY:
        logger.warning("GOOGLE_API_KEY is not set; quiz generation is disabled")
        return None

    from focus_hub.infrastructure.local.gemini_api_provider import GeminiAPIProvider
    return GeminiAPIProvider(api_key=settings.GOOGLE_API_KEY, model_name=settings.GEMINI_MODEL)


# ===========================================
# Application State
# ===========================================


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_auth_provider(request: Request) -> IAuthProvider:
    return request.app.state.auth_provider


def get_llm_provider(request: Request) -> ILLMProvider:
    provider = getattr(request.app.state, "llm_provider", None)
    if provider is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Quiz generation is not configured",
        )
    return provider


def get_clock() -> Callable[[], datetime]:
    """Return the clock used for time-window queries."""
    return now_utc


# ===========================================
# Repository Dependencies
# ===========================================


def get_class_repository(db: Database = Depends(get_database)) -> IClassRepository:
    return SqliteClassRepository(db.session_factory)


def get_task_repository(db: Database = Depends(get_database)) -> ITaskRepository:
    return SqliteTaskRepository(db.session_factory)


def get_note_repository(db: Database = Depends(get_database)) -> INoteRepository:
    return SqliteNoteRepository(db.session_factory)


def get_expense_repository(db: Database = Depends(get_database)) -> IExpenseRepository:
    return SqliteExpenseRepository(db.session_factory)


def get_budget_repository(db: Database = Depends(get_database)) -> IBudgetRepository:
    return SqliteBudgetRepository(db.session_factory)


def get_user_repository(db: Database = Depends(get_database)) -> IUserRepository:
    return SqliteUserRepository(db.session_factory)


# ===========================================
# Authentication
# ===========================================


async def get_current_user(
    authorization: Annotated[str | None, Header()] = None,
    auth_provider: IAuthProvider = Depends(get_auth_provider),
) -> User:
    """
    Get current authenticated user.

    With the mock provider the bearer token is the caller's email; with
    Firebase it is a verified ID token.
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="unauthorized access",
        )

    # Extract token from "Bearer <token>"
    try:
        scheme, token = authorization.split()
        if scheme.lower() != "bearer":
            raise ValueError("Invalid scheme")
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="unauthorized access",
        )

    try:
        return await auth_provider.verify_token(token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        )


async def verify_email_scope(
    user: User = Depends(get_current_user),
    email: Optional[str] = Query(None, description="Must match the signed-in user"),
) -> User:
    """Reject requests that ask for another user's records."""
    if email is not None and email.strip().lower() != user.email.lower():
        raise to_http_exception(ForbiddenError("Forbidden Access"))
    return user


# ===========================================
# Service Dependencies
# ===========================================


def get_class_service(
    repo: IClassRepository = Depends(get_class_repository),
    settings: Settings = Depends(get_app_settings),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> ScheduleService[ClassItem]:
    return ScheduleService(
        repo,
        item_model=ClassItem,
        label="class",
        clock=clock,
        owner_scoped_delete=settings.CLASS_DELETE_OWNER_SCOPED,
    )


def get_task_service(
    repo: ITaskRepository = Depends(get_task_repository),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> ScheduleService[TaskItem]:
    return ScheduleService(repo, item_model=TaskItem, label="task", clock=clock)


def get_note_service(repo: INoteRepository = Depends(get_note_repository)) -> NoteService:
    return NoteService(repo)


def get_quiz_service(
    llm_provider: ILLMProvider = Depends(get_llm_provider),
    settings: Settings = Depends(get_app_settings),
) -> QuizService:
    return QuizService(llm_provider, question_count=settings.QUIZ_QUESTION_COUNT)


# ===========================================
# Type Aliases for Dependency Injection
# ===========================================

AppSettings = Annotated[Settings, Depends(get_app_settings)]
CurrentUser = Annotated[User, Depends(get_current_user)]
ScopedUser = Annotated[User, Depends(verify_email_scope)]

ExpenseRepo = Annotated[IExpenseRepository, Depends(get_expense_repository)]
BudgetRepo = Annotated[IBudgetRepository, Depends(get_budget_repository)]
UserRepo = Annotated[IUserRepository, Depends(get_user_repository)]

ClassService = Annotated[ScheduleService[ClassItem], Depends(get_class_service)]
TaskService = Annotated[ScheduleService[TaskItem], Depends(get_task_service)]
NoteSvc = Annotated[NoteService, Depends(get_note_service)]
QuizSvc = Annotated[QuizService, Depends(get_quiz_service)]

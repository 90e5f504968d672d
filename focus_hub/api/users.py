"""
Users API endpoints.
"""

from fastapi import APIRouter, status

from focus_hub.api.deps import CurrentUser, UserRepo
from focus_hub.api.errors import to_http_exception
from focus_hub.core.exceptions import FocusHubError
from focus_hub.models.user import UserAccount, UserRegistration

router = APIRouter(tags=["users"])


@router.post("/user", response_model=UserAccount, status_code=status.HTTP_201_CREATED)
async def register_user(registration: UserRegistration, user: CurrentUser, repo: UserRepo):
    """Register the signed-in user. The email always comes from the token."""
    profile = registration.user
    if profile.display_name is None and user.display_name:
        profile = profile.model_copy(update={"display_name": user.display_name})
    try:
        return await repo.create(user.email, profile)
    except FocusHubError as exc:
        raise to_http_exception(exc) from exc


@router.get("/users", response_model=list[UserAccount])
async def list_users(user: CurrentUser, repo: UserRepo):
    return await repo.list()

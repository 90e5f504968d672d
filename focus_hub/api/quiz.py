"""
Quiz generation endpoint backed by Gemini.
"""

from fastapi import APIRouter

from focus_hub.api.deps import CurrentUser, QuizSvc
from focus_hub.api.errors import to_http_exception
from focus_hub.core.exceptions import FocusHubError
from focus_hub.models.quiz import QuizRequest, QuizResponse

router = APIRouter(tags=["quiz"])


@router.post("/gemini", response_model=QuizResponse)
async def generate_quiz(request: QuizRequest, user: CurrentUser, service: QuizSvc):
    """Generate practice questions with answers for a subject and level."""
    try:
        return await service.generate(request)
    except FocusHubError as exc:
        raise to_http_exception(exc) from exc

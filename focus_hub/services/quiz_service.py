"""
Quiz generation service.

Builds a plain-text prompt from the request and hands it to the LLM provider.
"""

from focus_hub.core.logger import setup_logger
from focus_hub.interfaces.llm_provider import ILLMProvider
from focus_hub.models.quiz import QuizRequest, QuizResponse

logger = setup_logger(__name__)


def build_quiz_prompt(request: QuizRequest, question_count: int) -> str:
    return (
        f"generate {question_count} questions with answers on {request.subject} "
        f"at {request.sub_topic} and level {request.level} subject or topic "
        f"on {request.language} language"
    )


class QuizService:
    def __init__(self, llm_provider: ILLMProvider, question_count: int = 5):
        self.llm_provider = llm_provider
        self.question_count = question_count

    async def generate(self, request: QuizRequest) -> QuizResponse:
        """
        Generate quiz questions.

        Raises:
            LLMError: If the provider fails or returns nothing
        """
        prompt = build_quiz_prompt(request, self.question_count)
        logger.info(
            f"Generating quiz with {self.llm_provider.get_model_name()}: "
            f"subject={request.subject!r} level={request.level!r}"
        )
        content = await self.llm_provider.generate_text(prompt)
        return QuizResponse(content=content)

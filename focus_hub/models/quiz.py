"""
Quiz generation request/response models.
"""

from pydantic import Field

from focus_hub.models.base import CamelModel


class QuizRequest(CamelModel):
    subject: str = Field(..., min_length=1, max_length=100)
    sub_topic: str = Field(..., min_length=1, max_length=200)
    level: str = Field(..., min_length=1, max_length=50)
    language: str = Field("English", min_length=1, max_length=50)


class QuizResponse(CamelModel):
    content: str

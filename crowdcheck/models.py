from enum import Enum
from pydantic import BaseModel, Field
from typing import Any, Optional

MISSING_FIELDS_ERROR = "Missing required fields: text and type"
INVALID_TYPE_ERROR = 'Type must be either "comment" or "post"'


class ContentType(str, Enum):
    COMMENT = "comment"
    POST = "post"


# labels per content type: (positive, negative, neutral)
COMMENT_LABELS = ("supporting", "claiming_fake", "neutral")
POST_LABELS = ("true", "fake", "neutral")


def labels_for(content_type: ContentType):
    return COMMENT_LABELS if content_type == ContentType.COMMENT else POST_LABELS


class InvalidRequest(ValueError):
    """Raised when an analysis request is rejected before inference."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClassificationRequest(BaseModel):
    text: str
    content_type: ContentType

    @classmethod
    def from_payload(cls, payload: Any) -> "ClassificationRequest":
        """Validate a decoded ``{"text", "type"}`` body.

        Empty or non-string text, or a missing type, is a missing-fields error;
        any other type string is a type error.
        """
        if not isinstance(payload, dict):
            raise InvalidRequest(MISSING_FIELDS_ERROR)
        text = payload.get("text")
        kind = payload.get("type")
        if not isinstance(text, str) or not text or not kind:
            raise InvalidRequest(MISSING_FIELDS_ERROR)
        if kind not in (ContentType.COMMENT.value, ContentType.POST.value):
            raise InvalidRequest(INVALID_TYPE_ERROR)
        return cls(text=text, content_type=ContentType(kind))


class SentimentVerdict(BaseModel):
    score: float = Field(ge=-1.0, le=1.0)
    label: str              # supporting | claiming_fake | neutral, or true | fake | neutral
    confidence: float = Field(ge=0.1, le=1.0)

    def to_response(self) -> "AnalyzeOut":
        return AnalyzeOut(
            sentiment_score=self.score,
            sentiment_label=self.label,
            sentiment_confidence=self.confidence,
        )


class AnalyzeOut(BaseModel):
    sentiment_score: float
    sentiment_label: str
    sentiment_confidence: float


class ErrorOut(BaseModel):
    error: str


class VoteTally(BaseModel):
    true_votes: int = Field(default=0, ge=0)
    fake_votes: int = Field(default=0, ge=0)
    neutral_votes: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.true_votes + self.fake_votes + self.neutral_votes


class CombinedVerdict(BaseModel):
    status: str             # "true" | "fake" | "neutral"
    confidence: float       # 0..1
    label: str


class CommentSentimentIn(BaseModel):
    content: str


class PostSentimentIn(BaseModel):
    title: str
    description: Optional[str] = ""

# quiz_service/schemas.py
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

AI_EMOJI = "🤖"


class QuizRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    # presence is checked by the route so a missing field gets a 400, not a 422
    grade: Optional[str] = None
    unit: Optional[str] = None
    topic: Optional[str] = None
    question_count: int = Field(default=5, alias="questionCount")

    def missing_fields(self) -> List[str]:
        return [name for name in ("grade", "unit", "topic") if not getattr(self, name)]


class CandidateQuestion(BaseModel):
    """The four fields a model-written question must carry to be kept."""

    model_config = ConfigDict(extra="ignore")

    question: StrictStr = Field(min_length=1)
    options: List[StrictStr] = Field(min_length=4, max_length=4)
    answer: int = Field(ge=0, le=3)
    explanation: StrictStr = Field(min_length=1)

    @field_validator("answer", mode="before")
    @classmethod
    def _answer_is_number(cls, value: Any) -> Any:
        # JSON numbers only; "1" and true are not answer indexes
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("answer must be a number")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError("answer must be a whole number")
            return int(value)
        return value


class GeneratedQuestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    question: str
    options: List[str] = Field(min_length=4, max_length=4)
    answer: int = Field(ge=0, le=3)
    explanation: str
    is_ai: bool = Field(default=True, alias="isAI")
    grade: str
    unit: str
    topic: str
    emoji: str = AI_EMOJI


class QuizResponse(BaseModel):
    success: bool = True
    questions: List[GeneratedQuestion]
    count: int
    message: str

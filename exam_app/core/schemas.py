"""Wire schemas for the verification and question-bank endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from exam_app.core.models import Question


def _scalar_to_text(value: object) -> object:
    """Numbers in the question bank compare as their text, like the web client did."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class VerifyRequest(BaseModel):
    name: str
    code: str


class VerifyResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    access: bool = False

    @field_validator("access", mode="before")
    @classmethod
    def _coerce_truthy(cls, value: object) -> bool:
        return bool(value)


class QuestionPayload(BaseModel):
    """One item of the `GET /tests` response array."""

    model_config = ConfigDict(extra="ignore")

    id: int | str
    question: str
    options: list[str] = Field(min_length=1)
    answer: str

    @field_validator("options", mode="before")
    @classmethod
    def _options_as_text(cls, value: object) -> object:
        if isinstance(value, list):
            return [_scalar_to_text(item) for item in value]
        return value

    @field_validator("answer", mode="before")
    @classmethod
    def _answer_as_text(cls, value: object) -> object:
        return _scalar_to_text(value)

    @model_validator(mode="after")
    def _answer_must_be_an_option(self) -> "QuestionPayload":
        if self.answer not in self.options:
            raise ValueError(f"Answer for question {self.id!r} is not one of its options.")
        return self

    def to_question(self) -> Question:
        return Question(
            id=self.id,
            prompt=self.question,
            options=tuple(self.options),
            correct_option=self.answer,
        )

"""
Pydantic models for answers.

`question_uuid` stays a plain string on input so a malformed id reaches the
DAO and is reported as a bad request instead of a validation error.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Answer(BaseModel):
    model_config = ConfigDict(frozen=True)

    question_uuid: str
    content: str


class AnswerDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    answer_uuid: str
    question_uuid: str
    content: str
    created_at: str


class AnswerId(BaseModel):
    model_config = ConfigDict(frozen=True)

    answer_uuid: str

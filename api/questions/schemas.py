"""
Pydantic models for questions.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str


class QuestionDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    question_uuid: str
    title: str
    description: str
    created_at: str


class QuestionId(BaseModel):
    model_config = ConfigDict(frozen=True)

    question_uuid: str

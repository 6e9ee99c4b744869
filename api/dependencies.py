"""
Application context and the FastAPI dependencies that hand it to routes.

`AppState` is built once in the lifespan (`main.py`) and stored on
`app.state.context`. Routes never reach for module globals.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, Request

from answers.repository import AnswersDao, AnswersDaoImpl
from core.db import Database
from questions.repository import QuestionsDao, QuestionsDaoImpl


@dataclass(frozen=True)
class AppState:
    questions_dao: QuestionsDao
    answers_dao: AnswersDao

    @classmethod
    def from_database(cls, db: Database) -> AppState:
        return cls(
            questions_dao=QuestionsDaoImpl(db),
            answers_dao=AnswersDaoImpl(db),
        )


def get_app_state(request: Request) -> AppState:
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise RuntimeError("Application context is not initialized.")
    return context


def get_questions_dao(state: AppState = Depends(get_app_state)) -> QuestionsDao:
    return state.questions_dao


def get_answers_dao(state: AppState = Depends(get_app_state)) -> AnswersDao:
    return state.answers_dao

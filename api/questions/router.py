"""
Question API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dependencies import get_questions_dao

from . import service
from .repository import QuestionsDao
from .schemas import Question, QuestionDetail, QuestionId

router = APIRouter()


@router.post("/question")
async def create_question(
    question: Question,
    questions_dao: QuestionsDao = Depends(get_questions_dao),
) -> QuestionDetail:
    return await service.create_question(question, questions_dao)


@router.get("/questions")
async def read_questions(
    questions_dao: QuestionsDao = Depends(get_questions_dao),
) -> list[QuestionDetail]:
    return await service.read_questions(questions_dao)


@router.delete("/question")
async def delete_question(
    question_id: QuestionId,
    questions_dao: QuestionsDao = Depends(get_questions_dao),
) -> None:
    await service.delete_question(question_id, questions_dao)

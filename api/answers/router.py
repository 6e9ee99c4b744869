"""
Answer API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dependencies import get_answers_dao
from questions.schemas import QuestionId

from . import service
from .repository import AnswersDao
from .schemas import Answer, AnswerDetail, AnswerId

router = APIRouter()


@router.post("/answer")
async def create_answer(
    answer: Answer,
    answers_dao: AnswersDao = Depends(get_answers_dao),
) -> AnswerDetail:
    return await service.create_answer(answer, answers_dao)


# The question id travels in a JSON body, even on GET.
@router.get("/answers")
async def read_answers(
    question_id: QuestionId,
    answers_dao: AnswersDao = Depends(get_answers_dao),
) -> list[AnswerDetail]:
    return await service.read_answers(question_id, answers_dao)


@router.delete("/answer")
async def delete_answer(
    answer_id: AnswerId,
    answers_dao: AnswersDao = Depends(get_answers_dao),
) -> None:
    await service.delete_answer(answer_id, answers_dao)

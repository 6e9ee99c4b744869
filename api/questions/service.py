"""
Question request logic.

Each function calls exactly one DAO operation and turns data-layer errors
into `HandlerError`s. The DAO is passed in, so these functions work the same
against Postgres or a test double.
"""

from __future__ import annotations

import logging

from core.errors import DBError, HandlerError

from .repository import QuestionsDao
from .schemas import Question, QuestionDetail, QuestionId

logger = logging.getLogger(__name__)


async def create_question(question: Question, questions_dao: QuestionsDao) -> QuestionDetail:
    try:
        return await questions_dao.create_question(question)
    except DBError:
        logger.exception("create_question_failed")
        raise HandlerError.default_internal_error() from None


async def read_questions(questions_dao: QuestionsDao) -> list[QuestionDetail]:
    try:
        return await questions_dao.get_questions()
    except DBError:
        logger.exception("read_questions_failed")
        raise HandlerError.default_internal_error() from None


async def delete_question(question_id: QuestionId, questions_dao: QuestionsDao) -> None:
    try:
        await questions_dao.delete_question(question_id.question_uuid)
    except DBError:
        logger.exception("delete_question_failed question_uuid=%s", question_id.question_uuid)
        raise HandlerError.default_internal_error() from None

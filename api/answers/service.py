"""
Answer request logic.

Only `create_answer` reports a bad request: there an invalid or unknown
`question_uuid` is the caller's mistake. Every other failure is an internal
error with a generic message.
"""

from __future__ import annotations

import logging

from core.errors import BadRequest, DBError, HandlerError, InvalidUUID

from questions.schemas import QuestionId

from .repository import AnswersDao
from .schemas import Answer, AnswerDetail, AnswerId

logger = logging.getLogger(__name__)


async def create_answer(answer: Answer, answers_dao: AnswersDao) -> AnswerDetail:
    try:
        return await answers_dao.create_answer(answer)
    except InvalidUUID as exc:
        logger.exception("create_answer_failed question_uuid=%s", answer.question_uuid)
        raise BadRequest(exc.message) from None
    except DBError:
        logger.exception("create_answer_failed question_uuid=%s", answer.question_uuid)
        raise HandlerError.default_internal_error() from None


async def read_answers(question_id: QuestionId, answers_dao: AnswersDao) -> list[AnswerDetail]:
    try:
        return await answers_dao.get_answers(question_id.question_uuid)
    except DBError:
        logger.exception("read_answers_failed question_uuid=%s", question_id.question_uuid)
        raise HandlerError.default_internal_error() from None


async def delete_answer(answer_id: AnswerId, answers_dao: AnswersDao) -> None:
    try:
        await answers_dao.delete_answer(answer_id.answer_uuid)
    except DBError:
        logger.exception("delete_answer_failed answer_uuid=%s", answer_id.answer_uuid)
        raise HandlerError.default_internal_error() from None

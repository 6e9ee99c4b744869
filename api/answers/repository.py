"""
Answers persistence (raw SQL).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import asyncpg

from core.db import STORE_ERRORS, Database, parse_uuid
from core.errors import InvalidUUID, OtherDBError

from .schemas import Answer, AnswerDetail

logger = logging.getLogger(__name__)


class AnswersDao(ABC):
    @abstractmethod
    async def create_answer(self, answer: Answer) -> AnswerDetail:
        ...

    @abstractmethod
    async def delete_answer(self, answer_uuid: str) -> None:
        ...

    @abstractmethod
    async def get_answers(self, question_uuid: str) -> list[AnswerDetail]:
        ...


def _to_detail(row: dict) -> AnswerDetail:
    return AnswerDetail(
        answer_uuid=str(row["answer_uuid"]),
        question_uuid=str(row["question_uuid"]),
        content=str(row["content"]),
        created_at=str(row["created_at"]),
    )


class AnswersDaoImpl(AnswersDao):
    def __init__(self, db: Database) -> None:
        self.db = db

    async def create_answer(self, answer: Answer) -> AnswerDetail:
        question_uuid = parse_uuid(answer.question_uuid)
        try:
            row = await self.db.fetch_one(
                """
                INSERT INTO answers (question_uuid, content)
                VALUES ($1, $2)
                RETURNING answer_uuid, question_uuid, content, created_at
                """,
                question_uuid,
                answer.content,
            )
        except asyncpg.ForeignKeyViolationError as exc:
            # Driver text stays in the logs; the message goes back to the caller.
            logger.warning("answer_question_missing question_uuid=%s error=%s", question_uuid, exc)
            raise InvalidUUID(f"Question {question_uuid} does not exist.") from exc
        except STORE_ERRORS as exc:
            raise OtherDBError(exc) from exc
        if row is None:
            raise OtherDBError(RuntimeError("INSERT INTO answers returned no row."))
        return _to_detail(row)

    async def delete_answer(self, answer_uuid: str) -> None:
        uuid = parse_uuid(answer_uuid)
        # No matching row is not an error.
        try:
            await self.db.execute(
                """
                DELETE FROM answers
                WHERE answer_uuid = $1
                """,
                uuid,
            )
        except STORE_ERRORS as exc:
            raise OtherDBError(exc) from exc

    async def get_answers(self, question_uuid: str) -> list[AnswerDetail]:
        uuid = parse_uuid(question_uuid)
        try:
            rows = await self.db.fetch_all(
                """
                SELECT answer_uuid, question_uuid, content, created_at
                FROM answers
                WHERE question_uuid = $1
                ORDER BY created_at ASC, answer_uuid ASC
                """,
                uuid,
            )
        except STORE_ERRORS as exc:
            raise OtherDBError(exc) from exc
        return [_to_detail(row) for row in rows]

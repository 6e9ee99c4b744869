"""
Questions persistence (raw SQL).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from core.db import STORE_ERRORS, Database, parse_uuid
from core.errors import OtherDBError

from .schemas import Question, QuestionDetail


class QuestionsDao(ABC):
    @abstractmethod
    async def create_question(self, question: Question) -> QuestionDetail:
        ...

    @abstractmethod
    async def delete_question(self, question_uuid: str) -> None:
        ...

    @abstractmethod
    async def get_questions(self) -> list[QuestionDetail]:
        ...


def _to_detail(row: dict) -> QuestionDetail:
    return QuestionDetail(
        question_uuid=str(row["question_uuid"]),
        title=str(row["title"]),
        description=str(row["description"]),
        created_at=str(row["created_at"]),
    )


class QuestionsDaoImpl(QuestionsDao):
    def __init__(self, db: Database) -> None:
        self.db = db

    async def create_question(self, question: Question) -> QuestionDetail:
        try:
            row = await self.db.fetch_one(
                """
                INSERT INTO questions (title, description)
                VALUES ($1, $2)
                RETURNING question_uuid, title, description, created_at
                """,
                question.title,
                question.description,
            )
        except STORE_ERRORS as exc:
            raise OtherDBError(exc) from exc
        if row is None:
            raise OtherDBError(RuntimeError("INSERT INTO questions returned no row."))
        return _to_detail(row)

    async def delete_question(self, question_uuid: str) -> None:
        uuid = parse_uuid(question_uuid)
        # No matching row is not an error.
        try:
            await self.db.execute(
                """
                DELETE FROM questions
                WHERE question_uuid = $1
                """,
                uuid,
            )
        except STORE_ERRORS as exc:
            raise OtherDBError(exc) from exc

    async def get_questions(self) -> list[QuestionDetail]:
        try:
            rows = await self.db.fetch_all(
                """
                SELECT question_uuid, title, description, created_at
                FROM questions
                ORDER BY created_at ASC, question_uuid ASC
                """
            )
        except STORE_ERRORS as exc:
            raise OtherDBError(exc) from exc
        return [_to_detail(row) for row in rows]

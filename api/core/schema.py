"""
Idempotent schema bootstrap for the questions/answers tables.

UUID primary keys and creation timestamps are generated by Postgres.
"""

from __future__ import annotations

import logging

from .db import Database

logger = logging.getLogger(__name__)

# gen_random_uuid() is built in from Postgres 13. Needs CREATE on the schema;
# run with DB_CREATE_SCHEMA=false where the tables are managed elsewhere.
SCHEMA_STATEMENTS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS questions (
        question_uuid UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        title TEXT NOT NULL,
        description TEXT NOT NULL,
        created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS answers (
        answer_uuid UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        question_uuid UUID NOT NULL
            REFERENCES questions (question_uuid) ON DELETE CASCADE,
        content TEXT NOT NULL,
        created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS answers_question_uuid_idx
    ON answers (question_uuid, created_at)
    """,
)


async def ensure_schema(db: Database) -> None:
    for statement in SCHEMA_STATEMENTS:
        await db.execute(statement)
    logger.info("db_schema_ready tables=questions,answers")

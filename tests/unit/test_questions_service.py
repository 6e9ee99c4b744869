import asyncio
import logging

import pytest

from core.errors import (
    GENERIC_ERROR_MESSAGE,
    BadRequest,
    HandlerError,
    InternalError,
    InvalidUUID,
    OtherDBError,
)
from questions import service
from questions.schemas import QuestionId


def test_create_question_returns_question(question, question_detail, questions_dao):
    questions_dao.mock("create_question", question_detail)

    result = asyncio.run(service.create_question(question, questions_dao))

    assert result == question_detail
    assert questions_dao.calls == [("create_question", (question,))]


def test_create_question_maps_invalid_uuid_to_internal_error(question, questions_dao):
    questions_dao.mock("create_question", InvalidUUID("test"))

    with pytest.raises(InternalError) as exc_info:
        asyncio.run(service.create_question(question, questions_dao))

    assert not isinstance(exc_info.value, BadRequest)


def test_create_question_hides_store_error_text(question, questions_dao, caplog):
    questions_dao.mock("create_question", OtherDBError(ConnectionError("password=hunter2")))

    with caplog.at_level(logging.ERROR, logger="questions.service"):
        with pytest.raises(InternalError) as exc_info:
            asyncio.run(service.create_question(question, questions_dao))

    assert exc_info.value.message == GENERIC_ERROR_MESSAGE
    assert "hunter2" not in str(exc_info.value)
    # The cause is logged instead.
    assert "create_question_failed" in caplog.text
    assert "hunter2" in caplog.text


def test_read_questions_returns_questions(question_detail, questions_dao):
    questions_dao.mock("get_questions", [question_detail])

    result = asyncio.run(service.read_questions(questions_dao))

    assert result == [question_detail]


def test_read_questions_returns_error(questions_dao):
    questions_dao.mock("get_questions", InvalidUUID("test"))

    with pytest.raises(InternalError):
        asyncio.run(service.read_questions(questions_dao))


def test_delete_question_succeeds(questions_dao):
    question_id = QuestionId(question_uuid="123")
    questions_dao.mock("delete_question", None)

    result = asyncio.run(service.delete_question(question_id, questions_dao))

    assert result is None
    assert questions_dao.calls == [("delete_question", ("123",))]


def test_delete_question_returns_error(questions_dao):
    question_id = QuestionId(question_uuid="123")
    questions_dao.mock("delete_question", InvalidUUID("test"))

    with pytest.raises(HandlerError) as exc_info:
        asyncio.run(service.delete_question(question_id, questions_dao))

    assert isinstance(exc_info.value, InternalError)
    assert exc_info.value.message == GENERIC_ERROR_MESSAGE

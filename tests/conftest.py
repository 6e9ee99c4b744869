# tests/conftest.py
import logging

import pytest
from fastapi.testclient import TestClient

from answers.repository import AnswersDao
from answers.schemas import Answer, AnswerDetail
from dependencies import AppState, get_app_state
from main import create_app
from questions.repository import QuestionsDao
from questions.schemas import Question, QuestionDetail

logging.basicConfig(level=logging.INFO)

QUESTION_UUID = "b068cd2f-edac-479e-98f1-c5f91008dcbd"
ANSWER_UUID = "a1a14a9c-ab9c-4f6a-8a57-1dd0d8a1e5a6"


class _ProgrammedDao:
    """
    Returns (or raises) whatever was programmed for an operation, once.
    """

    def __init__(self):
        self.responses = {}
        self.calls = []

    def mock(self, operation, response):
        self.responses[operation] = response

    def _respond(self, operation, *args):
        self.calls.append((operation, args))
        if operation not in self.responses:
            raise AssertionError(f"{operation} response was not programmed.")
        response = self.responses.pop(operation)
        if isinstance(response, BaseException):
            raise response
        return response


class DummyQuestionsDao(_ProgrammedDao, QuestionsDao):
    async def create_question(self, question):
        return self._respond("create_question", question)

    async def delete_question(self, question_uuid):
        return self._respond("delete_question", question_uuid)

    async def get_questions(self):
        return self._respond("get_questions")


class DummyAnswersDao(_ProgrammedDao, AnswersDao):
    async def create_answer(self, answer):
        return self._respond("create_answer", answer)

    async def delete_answer(self, answer_uuid):
        return self._respond("delete_answer", answer_uuid)

    async def get_answers(self, question_uuid):
        return self._respond("get_answers", question_uuid)


class FakeDatabase:
    """
    Stands in for `core.db.Database`: records SQL, replays programmed rows
    or raises a programmed error.
    """

    def __init__(self, *, row=None, rows=None, status="DELETE 0", error=None):
        self.row = row
        self.rows = rows or []
        self.status = status
        self.error = error
        self.calls = []
        self.closed = False

    def _record(self, method, sql, args):
        self.calls.append((method, " ".join(sql.split()), args))
        if self.error is not None:
            raise self.error

    async def fetch_one(self, sql, *args):
        self._record("fetch_one", sql, args)
        return self.row

    async def fetch_all(self, sql, *args):
        self._record("fetch_all", sql, args)
        return list(self.rows)

    async def execute(self, sql, *args):
        self._record("execute", sql, args)
        return self.status

    async def close(self):
        self.closed = True


@pytest.fixture()
def question():
    return Question(title="test title", description="test description")


@pytest.fixture()
def question_detail(question):
    return QuestionDetail(
        question_uuid=QUESTION_UUID,
        title=question.title,
        description=question.description,
        created_at="2024-01-01 12:00:00.000001",
    )


@pytest.fixture()
def answer():
    return Answer(question_uuid=QUESTION_UUID, content="test content")


@pytest.fixture()
def answer_detail(answer):
    return AnswerDetail(
        answer_uuid=ANSWER_UUID,
        question_uuid=answer.question_uuid,
        content=answer.content,
        created_at="2024-01-01 12:00:01",
    )


@pytest.fixture()
def questions_dao():
    return DummyQuestionsDao()


@pytest.fixture()
def answers_dao():
    return DummyAnswersDao()


@pytest.fixture()
def fake_db():
    return FakeDatabase


@pytest.fixture()
def client(questions_dao, answers_dao):
    # No `with` block: the lifespan (and its Postgres pool) never starts.
    app = create_app()
    state = AppState(questions_dao=questions_dao, answers_dao=answers_dao)
    app.dependency_overrides[get_app_state] = lambda: state
    return TestClient(app)

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from answers import router as answers_router
from core.config import Settings, cors_allow_origins
from core.db import Database
from core.errors import BadRequest, HandlerError
from core.schema import ensure_schema
from dependencies import AppState
from questions import router as questions_router

logger = logging.getLogger(__name__)


def resolve_log_level(name: str) -> str:
    # getLevelName returns an int only for registered level names.
    level = (name or "").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )


async def _log_stored_questions(state: AppState) -> None:
    questions = await state.questions_dao.get_questions()
    logger.info("startup_questions count=%s", len(questions))
    for question in questions:
        logger.debug("startup_question %s", question.model_dump())


def _lifespan(settings: Settings | None):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One pool per process, shared through the app context.
        config = settings or Settings.from_env()
        configure_logging(config.log_level)
        db = await Database.connect(config)
        try:
            if config.create_schema:
                await ensure_schema(db)
            state = AppState.from_database(db)
            app.state.context = state
            await _log_stored_questions(state)
            yield
        finally:
            app.state.context = None
            await db.close()
            logger.info("db_pool_closed")

    return lifespan


async def handler_error_response(_: Request, exc: HandlerError) -> PlainTextResponse:
    if isinstance(exc, BadRequest):
        return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)
    return PlainTextResponse(exc.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(title="Questions & Answers API", lifespan=_lifespan(settings))

    # Settings are resolved lazily in the lifespan; CORS must be known now.
    origins = settings.cors_allow_origins if settings is not None else cors_allow_origins()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(HandlerError, handler_error_response)

    app.include_router(questions_router.router, tags=["questions"])
    app.include_router(answers_router.router, tags=["answers"])
    return app


app = create_app()


if __name__ == "__main__":
    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host=settings.app_host, port=settings.app_port)

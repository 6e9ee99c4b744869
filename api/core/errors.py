"""
Error taxonomy shared by the data layer and the request handlers.

Two tiers:
- `DBError` is raised by DAOs. `InvalidUUID` covers identifiers that do not
  parse and foreign keys the store rejects; `OtherDBError` wraps any other
  store failure.
- `HandlerError` is raised by the inner handlers and turned into an HTTP
  response in `main.py`. Its message is always safe to show to the caller.
"""

from __future__ import annotations


GENERIC_ERROR_MESSAGE = "Something went wrong! Please try again."


class DBError(Exception):
    pass


class InvalidUUID(DBError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class OtherDBError(DBError):
    """
    Opaque store failure. `cause` is kept for logs only.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"{type(cause).__name__}: {cause}")
        self.cause = cause


class HandlerError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @staticmethod
    def default_internal_error() -> InternalError:
        return InternalError(GENERIC_ERROR_MESSAGE)


class BadRequest(HandlerError):
    pass


class InternalError(HandlerError):
    pass

"""
STORE ERRORS
============

Every data store operation reports failure the same way: it raises
DbInternalError with the original exception attached as `cause` (and as
`__cause__`, so tracebacks show both). Callers that need to know *why* an
operation failed inspect the cause, e.g.:

    try:
        store.get_chat_by_id(chat_id)
    except DbInternalError as e:
        if isinstance(e.cause, NotFoundError):
            ...
"""


class DbError(Exception):
    """Base class for data store failures."""


class DbInternalError(DbError):
    def __init__(self, cause: Exception):
        super().__init__(str(cause))
        self.cause = cause
        self.__cause__ = cause


class NotFoundError(LookupError):
    """A keyed lookup (user, session, chat, message) found nothing."""


class InvalidCredentialsError(ValueError):
    """Password did not match the stored hash."""

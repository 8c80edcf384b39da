"""
Domain errors raised by providers and services

Routers translate them into HTTP responses via ``to_http_exception``.
"""
from fastapi import HTTPException


class MindTrackError(Exception):
    """Base class, carries the HTTP status the API layer reports"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RecordRetrievalError(MindTrackError):
    """The record store could not be queried"""
    status_code = 503


class ActivityTypeNotFoundError(MindTrackError):
    status_code = 404


class DefaultActivityTypeError(MindTrackError):
    """Shared activity types are read-only"""
    status_code = 403


class ActivityTypeInUseError(MindTrackError):
    status_code = 409


class ActivityRecordNotFoundError(MindTrackError):
    status_code = 404


class InvalidTimeRangeError(MindTrackError):
    status_code = 400


class SelfTestUnavailableError(MindTrackError):
    """The once-per-day limit has not elapsed yet"""
    status_code = 400


def to_http_exception(error: MindTrackError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.message)

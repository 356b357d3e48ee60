"""
Error types raised by repositories, services and the identity resolver.

Routers never build error responses themselves: every `AppError` is rendered by
the exception handler registered in `main.py`.
"""
from typing import Any, Dict, Optional

from starlette import status


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, payload: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.payload = payload

    def to_dict(self) -> Dict[str, Any]:
        if self.payload is not None:
            return self.payload
        return {'message': self.message}


class AuthenticationError(AppError):
    """Missing, malformed, expired or otherwise unverifiable token, or a failed user reconciliation."""
    status_code = status.HTTP_401_UNAUTHORIZED

    def to_dict(self) -> Dict[str, Any]:
        return {'error': 'Unauthorized', 'message': self.message}


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    @classmethod
    def tagged(cls, tag: str) -> 'NotFoundError':
        return cls(tag, payload={'error': tag})


class ConflictError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class ValidationError(AppError):
    """Raised when a record lacks the fields required to insert it."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, fields=None):
        super().__init__(message)
        self.fields = list(fields or [])

    def to_dict(self) -> Dict[str, Any]:
        result = {'error': 'ValidationError', 'message': self.message}
        if self.fields:
            result['fields'] = self.fields
        return result


class PersistenceError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class DuplicateRecordError(PersistenceError):
    """A unique or primary key constraint rejected an insert."""

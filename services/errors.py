# services/errors.py
"""
Error kinds raised by the service layer.

Every service error carries the HTTP status code it maps to, so the API layer
can render it without knowing about individual operations. Anything that is
not a ServiceError is masked as InternalError by `with_error_handling`.
"""
import functools
import logging

logger = logging.getLogger(__name__)


class ServiceError(Exception):
     """Base class for errors that are safe to show to the caller."""

     status_code = 500
     default_message = "Unexpected error"

     def __init__(self, message: str = None):
          self.message = message or self.default_message
          super().__init__(self.message)


class Unauthorized(ServiceError):
     status_code = 401
     default_message = "Authentication required"


class Forbidden(ServiceError):
     status_code = 403
     default_message = "Insufficient permissions"


class NotFound(ServiceError):
     status_code = 404
     default_message = "Not found"


class BadRequest(ServiceError):
     status_code = 400
     default_message = "Bad request"


class InternalError(ServiceError):
     status_code = 500
     default_message = "Unexpected error"


def with_error_handling(func):
     """
     Let ServiceError through unchanged; log anything else with its traceback
     and raise InternalError in its place.
     """
     @functools.wraps(func)
     def wrapper(*args, **kwargs):
          try:
               return func(*args, **kwargs)
          except ServiceError:
               raise
          except Exception as exc:
               logger.exception("Unexpected error in %s", func.__qualname__)
               raise InternalError() from exc

     return wrapper

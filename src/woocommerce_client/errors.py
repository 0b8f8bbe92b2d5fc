"""
Error types raised by the WooCommerce client and the classifier that maps
non-2xx responses onto them
"""

import logging
from http import HTTPStatus
from typing import Any, List, Optional

import requests
from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)


class WooCommerceError(Exception):
    """Base class for every error raised by this library"""
    pass


class ResponseDecodingError(WooCommerceError):
    """Raised when a response body from WooCommerce could not be parsed"""

    def __init__(self, message: str, body: bytes = b"", status: int = 0):
        super().__init__(message)
        self.message = message
        self.body = body
        self.status = status

    def __str__(self) -> str:
        return self.message


class PaginationUnavailableError(ResponseDecodingError):
    """Raised in strict mode when the Link header cannot be interpreted"""
    pass


class ResponseError(WooCommerceError):
    """
    General API error, either a single message or a list of messages

    https://woocommerce.github.io/woocommerce-rest-api-docs/#request-response-format
    """

    def __init__(self, status: int, message: str = "", data: Optional[List[str]] = None):
        super().__init__(message)
        self.status = status
        self.message = message
        self.data = data or []

    def __str__(self) -> str:
        return f"{self.status}: {self.message} [{' '.join(self.data)}]"


class RateLimitError(ResponseError):
    """Rate limited response, carrying the server suggested wait in seconds"""

    def __init__(self, status: int, message: str = "", data: Optional[List[str]] = None,
                 retry_after: int = 0):
        super().__init__(status, message, data)
        self.retry_after = retry_after


class ErrorEnvelope(BaseModel):
    """Error body returned by the WordPress REST layer"""
    model_config = ConfigDict(extra="ignore")

    code: Optional[str] = None
    message: Optional[str] = None
    status: Optional[str] = None
    error: Optional[str] = None
    data: Any = None


def check_response_error(response: requests.Response) -> None:
    """
    Raise the typed error for a non-2xx response

    Args:
        response: Response returned by the transport

    Raises:
        ResponseDecodingError: If the error body is not a valid error envelope
        RateLimitError: For HTTP 429
        ResponseError: For any other non-2xx status
    """
    status = response.status_code
    if 200 <= status < 300:
        return

    try:
        body = response.content or b""
    except (requests.exceptions.RequestException, RuntimeError) as e:
        raise ResponseError(status=status, message=str(e)) from e

    if not body:
        # No body to decode, fall back on the status specific handling
        error = ResponseError(status=status, message="")
        logger.error(f"Response error with empty body: {error}")
        raise wrap_specific_error(response, error)

    try:
        envelope = ErrorEnvelope.model_validate_json(body)
    except ValidationError as e:
        logger.error(f"Could not decode error response {body!r}: {e}")
        raise ResponseDecodingError(message=str(e), body=body, status=status) from e

    error = ResponseError(status=status, message=envelope.message or "")
    logger.error(f"Response error {body!r}: {error}")
    raise wrap_specific_error(response, error)


def wrap_specific_error(response: requests.Response, error: ResponseError) -> ResponseError:
    """
    Refine a generic response error based on its status

    Args:
        response: Response the error came from
        error: Generic error built from the response body

    Returns:
        RateLimitError for 429, the error with the standard reason phrase for
        406, otherwise the error unchanged
    """
    if error.status == HTTPStatus.TOO_MANY_REQUESTS:
        try:
            retry_after = max(0, int(float(response.headers.get("Retry-After", ""))))
        except (TypeError, ValueError, OverflowError):
            retry_after = 0
        return RateLimitError(
            status=error.status,
            message=error.message,
            data=error.data,
            retry_after=retry_after,
        )
    if error.status == HTTPStatus.NOT_ACCEPTABLE:
        error.message = HTTPStatus.NOT_ACCEPTABLE.phrase
    return error

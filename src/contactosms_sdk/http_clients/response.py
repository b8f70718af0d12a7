"""
Unified API result and response interpretation

Every call through the pipeline returns an ``ApiResponse``; HTTP errors,
envelope-level failures and malformed payloads are reported through its
fields instead of exceptions.
"""

import json
import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Generic, List, Mapping, Optional, Tuple, TypeVar

from ..models.base import convert_value
from ..models.responses import ErrorResponse

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Error code sentinels
SUCCESS_CODE = 0
SERVER_ERROR_CODE = int(HTTPStatus.INTERNAL_SERVER_ERROR)
TRANSPORT_ERROR_CODE = -1

PARSE_ERROR_DESCRIPTION = "Failed to parse response JSON"

# Decoding failures, including overflowing numbers and runaway nesting
PARSE_ERRORS = (ValueError, TypeError, OverflowError, RecursionError)


def status_phrase(status_code: int) -> str:
    """Standard reason phrase for a status code ("" when unknown)"""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


@dataclass
class ApiResponse(Generic[T]):
    """
    Uniform result of an API call
    
    Attributes:
        response: Raw response body text
        data: Deserialized payload (None when absent or on failure)
        http_code: HTTP status code
        http_description: HTTP reason phrase
        error_code: API error code (0 means success)
        error_description: Error description (empty on success)
    """
    response: str = ""
    data: Optional[T] = None
    http_code: int = int(HTTPStatus.OK)
    http_description: str = ""
    error_code: int = SUCCESS_CODE
    error_description: str = ""
    
    @property
    def is_ok(self) -> bool:
        """True when the HTTP status is 2xx and no API error was reported"""
        return 200 <= self.http_code < 300 and self.error_code == SUCCESS_CODE
    
    @classmethod
    def success(cls, data: T, raw_response: str = "") -> 'ApiResponse[T]':
        """Create a successful response"""
        return cls(
            response=raw_response,
            data=data,
            http_code=int(HTTPStatus.OK),
            http_description=HTTPStatus.OK.phrase,
        )
    
    @classmethod
    def error(
        cls,
        error_code: int,
        error_description: str,
        http_code: int = int(HTTPStatus.BAD_REQUEST),
        raw_response: str = ""
    ) -> 'ApiResponse[T]':
        """Create an error response"""
        return cls(
            response=raw_response,
            data=None,
            http_code=int(http_code),
            http_description=status_phrase(int(http_code)),
            error_code=error_code,
            error_description=error_description,
        )


@dataclass(frozen=True)
class RawResponse:
    """
    Transport-level response
    
    Attributes:
        status_code: HTTP status code
        reason: HTTP reason phrase
        headers: Response header (name, value) pairs in received order; repeated
            headers such as Set-Cookie keep every value
        content: Body bytes
    """
    status_code: int
    reason: str = ""
    headers: Tuple[Tuple[str, str], ...] = ()
    content: bytes = b""
    
    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
    
    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """First value of a header (case-insensitive)"""
        values = self.get_all_headers(name)
        return values[0] if values else default
    
    def get_all_headers(self, name: str) -> List[str]:
        """Every value of a header (case-insensitive)"""
        wanted = name.lower()
        return [value for key, value in self.headers if key.lower() == wanted]
    
    @property
    def text(self) -> str:
        """Body decoded as UTF-8"""
        return self.content.decode('utf-8', errors='replace')


def _envelope_error_description(document: Mapping[str, Any]) -> str:
    error = document.get('error')
    if isinstance(error, str):
        return error
    if isinstance(error, Mapping) and isinstance(error.get('message'), str):
        return error['message']
    message = document.get('message')
    return message if isinstance(message, str) else ""


class ResponseInterpreter:
    """
    Turns transport responses into ``ApiResponse`` objects.
    
    Successful bodies may either be the payload itself or an envelope of the
    form ``{"data": ..., "success": bool}``; both shapes are accepted.
    """
    
    def __init__(self, enable_logging: bool = False):
        self.enable_logging = enable_logging
    
    def interpret(self, raw: RawResponse, response_type: Any = None) -> ApiResponse:
        """
        Interpret a raw response.
        
        Args:
            raw: Transport response
            response_type: Type to deserialize the payload into (None keeps decoded JSON)
            
        Returns:
            ApiResponse: Populated result; never raises for malformed payloads
        """
        content = raw.text
        result: ApiResponse = ApiResponse(
            response=content,
            http_code=raw.status_code,
            http_description=raw.reason or status_phrase(raw.status_code),
        )
        
        if raw.is_success:
            self._handle_success(content, result, response_type)
        else:
            self._handle_error(content, result)
        
        return result
    
    def _handle_success(self, content: str, result: ApiResponse, response_type: Any) -> None:
        if not content.strip():
            return
        
        try:
            document = json.loads(content)
            
            if isinstance(document, dict) and 'data' in document:
                payload = document['data']
                if payload is not None:
                    result.data = convert_value(payload, response_type)
                
                # A 200 response can still carry a logical failure
                if document.get('success') is False and result.error_code == SUCCESS_CODE:
                    result.error_code = SERVER_ERROR_CODE
                    result.error_description = _envelope_error_description(document)
            else:
                result.data = convert_value(document, response_type)
            
            if self.enable_logging:
                logger.debug(f"Successful response: {result.http_code}")
                
        except PARSE_ERRORS as e:
            logger.error(f"Failed to deserialize response: {e}")
            result.data = None
            result.error_code = SERVER_ERROR_CODE
            result.error_description = PARSE_ERROR_DESCRIPTION
    
    def _handle_error(self, content: str, result: ApiResponse) -> None:
        result.error_code = result.http_code
        result.error_description = result.http_description or "Unknown error"
        
        if content.strip():
            try:
                self._apply_error_body(json.loads(content), result)
            except PARSE_ERRORS:
                logger.warning(f"Could not parse error response JSON: {content[:200]}")
        
        logger.warning(f"API error: {result.http_code} - {result.error_description}")
    
    @staticmethod
    def _apply_error_body(document: Any, result: ApiResponse) -> None:
        """Override error defaults with ``{"code": int, "error": str}`` when present."""
        if not isinstance(document, Mapping):
            return
        
        nested = document.get('error')
        if isinstance(nested, Mapping):
            # Nested form: {"error": {"code": ..., "message": ...}}
            document = {'code': nested.get('code'), 'error': nested.get('message')}
        
        if isinstance(document.get('code'), bool):
            document = {k: v for k, v in document.items() if k != 'code'}
        
        body = ErrorResponse.from_dict(document)
        if body.code is not None:
            result.error_code = body.code
        if body.error is not None:
            result.error_description = body.error

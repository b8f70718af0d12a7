"""
Type definitions for request signing functionality

This module provides type definitions and data classes for the HMAC-SHA1
request authentication scheme used by the ContactoSMS REST API.
"""

from typing import Dict, Optional, Any
from dataclasses import dataclass, field
from enum import Enum

from ..exceptions import SmsApiError


# Authorization scheme expected by the server
AUTH_SCHEME = "IM"

# Fixed client identification header
ORIGIN_HEADER = "X-IM-ORIGIN"
ORIGIN_VALUE = "IM_SDK_PYTHON"


class HttpMethod(str, Enum):
    """HTTP methods supported by the API"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


@dataclass(frozen=True)
class Credential:
    """
    API credential shared by every request of a client
    
    Attributes:
        api_key: Public key identifying the account
        secret_key: Shared secret used as HMAC key (never printed)
    """
    api_key: str
    secret_key: str = field(repr=False)
    
    def __post_init__(self):
        """Validate credential"""
        if not self.api_key or not self.api_key.strip():
            raise SigningError("API key cannot be empty", SigningErrorCodes.INVALID_API_KEY)
        
        if not self.secret_key or not self.secret_key.strip():
            raise SigningError("Secret key cannot be empty", SigningErrorCodes.INVALID_SECRET_KEY)
    
    @property
    def masked_api_key(self) -> str:
        """API key with everything but the last four characters hidden"""
        if len(self.api_key) <= 4:
            return "****"
        return "*" * (len(self.api_key) - 4) + self.api_key[-4:]


@dataclass(frozen=True)
class SignatureResult:
    """
    Result of signing a request
    
    Attributes:
        canonical_string: Exact string that was signed
        signature: Base64-encoded HMAC-SHA1 digest
        timestamp: HTTP-date that was signed and must be sent as Date header
        authorization: Complete Authorization header value
    """
    canonical_string: str = field(repr=False)
    signature: str
    timestamp: str
    authorization: str
    
    @property
    def headers(self) -> Dict[str, str]:
        """Authentication headers to attach to the outbound request"""
        return {
            'Authorization': self.authorization,
            'Date': self.timestamp,
        }


class SigningError(SmsApiError):
    """
    Error class for signing operations
    
    Attributes:
        message: Error message
        code: Error code for programmatic handling
        details: Optional additional error details
    """
    
    def __init__(
        self, 
        message: str, 
        code: str, 
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, details)
        self.message = message
        self.code = code
        
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (code: {self.code}, details: {self.details})"
        return f"{self.message} (code: {self.code})"
        
    def __repr__(self) -> str:
        return f"SigningError(message='{self.message}', code='{self.code}', details={self.details})"


# Common signing error codes
class SigningErrorCodes:
    """Standard error codes for signing operations"""
    
    # Credential errors
    INVALID_API_KEY = "INVALID_API_KEY"
    INVALID_SECRET_KEY = "INVALID_SECRET_KEY"
    
    # Request errors
    INVALID_TIMESTAMP = "INVALID_TIMESTAMP"
    INVALID_QUERY = "INVALID_QUERY"
    INVALID_URL = "INVALID_URL"
    
    # Serialization errors
    SERIALIZATION_FAILED = "SERIALIZATION_FAILED"

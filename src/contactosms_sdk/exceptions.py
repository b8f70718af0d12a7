"""
Exception classes for ContactoSMS Python SDK
"""

import asyncio
from typing import Optional, Dict, Any


class SmsApiError(Exception):
    """Base exception for all ContactoSMS SDK errors"""
    
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class ValidationError(SmsApiError):
    """Exception raised for invalid arguments passed by the caller"""
    pass


class ConfigurationError(SmsApiError):
    """Exception raised when client configuration is missing or invalid"""
    
    def __init__(self, message: str, errors: Optional[list] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "INVALID_CONFIGURATION", details)
        self.errors = errors or [message]


class TransportError(SmsApiError):
    """Exception raised for connectivity, DNS or timeout failures"""
    
    def __init__(self, message: str, timed_out: bool = False,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "TIMEOUT" if timed_out else "TRANSPORT_ERROR", details)
        self.timed_out = timed_out


class RequestCancelledError(asyncio.CancelledError):
    """Raised when a request is cancelled through its cancellation event"""
    
    def __init__(self, message: str = "Request was cancelled"):
        super().__init__(message)
        self.message = message

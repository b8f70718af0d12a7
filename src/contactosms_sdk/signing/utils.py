"""
Utility functions for request signing

This module provides timestamp generation and URL helpers used when
authenticating requests against the ContactoSMS API.
"""

import time
from datetime import datetime, timezone
from email.utils import formatdate, parsedate_to_datetime
from typing import Dict, Optional
from urllib.parse import urlparse

from .types import SigningError, SigningErrorCodes


def generate_timestamp() -> float:
    """
    Generate current Unix timestamp.
    
    Returns:
        float: Current Unix timestamp (seconds since epoch)
    """
    return time.time()


def format_http_date(moment: Optional[datetime] = None) -> str:
    """
    Format a moment as an RFC 7231 HTTP-date.
    
    The result is locale independent, e.g. ``Sun, 06 Nov 1994 08:49:37 GMT``.
    
    Args:
        moment: Moment to format (uses current time if None); naive values are taken as UTC
        
    Returns:
        str: HTTP-date string
    """
    if moment is None:
        return formatdate(generate_timestamp(), usegmt=True)
    
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    
    return formatdate(moment.timestamp(), usegmt=True)


def validate_http_date(value: str) -> bool:
    """
    Validate HTTP-date format.
    
    Args:
        value: Date header value to validate
        
    Returns:
        bool: True if value is a GMT HTTP-date
    """
    if not isinstance(value, str) or not value.endswith(' GMT'):
        return False
    
    try:
        parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return False
    
    return True


def parse_base_url(url: str) -> Dict[str, str]:
    """
    Parse and validate the API base URL.
    
    Args:
        url: Base URL string to parse
        
    Returns:
        dict: Dictionary with parsed URL components:
            - origin: scheme + netloc
            - pathname: path component, always ending with ``/``
            
    Raises:
        SigningError: If URL is not an absolute http(s) URL
    """
    parsed = urlparse(url or "")
    
    if not parsed.scheme or not parsed.netloc:
        raise SigningError(
            f"Invalid URL format: {url}",
            SigningErrorCodes.INVALID_URL,
            {"url": url}
        )
    
    if parsed.scheme not in ('http', 'https'):
        raise SigningError(
            f"Unsupported URL scheme: {parsed.scheme}",
            SigningErrorCodes.INVALID_URL,
            {"url": url, "scheme": parsed.scheme}
        )
    
    pathname = parsed.path or "/"
    if not pathname.endswith('/'):
        pathname += '/'
    
    return {
        "origin": f"{parsed.scheme}://{parsed.netloc}",
        "pathname": pathname,
    }

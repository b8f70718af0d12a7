"""
Query and body encoding for signed requests

The strings produced here are used twice: once inside the canonical string
that gets signed and once on the wire. Both uses must read the exact same
output, so callers encode once and pass the result along.
"""

import json
from enum import Enum
from typing import Any, Mapping, Optional
from urllib.parse import quote

from ..models.base import to_serializable
from .types import SigningError, SigningErrorCodes


def encode_query_component(value: str) -> str:
    """
    Percent-encode a query key or value in the server's dialect.
    
    Everything outside the RFC 3986 unreserved set is escaped and encoded
    spaces are then written as ``+``.
    
    Args:
        value: Raw key or value
        
    Returns:
        str: Encoded component
    """
    if not value:
        return ""
    return quote(value, safe='').replace('%20', '+')


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def canonicalize_query(params: Optional[Mapping[str, Any]]) -> str:
    """
    Build the canonical query string for a parameter mapping.
    
    Entries are sorted by key in code point order, so the output does not
    depend on insertion order. Entries whose value is ``None`` are skipped.
    
    Args:
        params: Query parameters (may be None or empty)
        
    Returns:
        str: ``key=value`` pairs joined with ``&``; empty string for no parameters
        
    Raises:
        SigningError: If a key is not a string
    """
    if not params:
        return ""
    
    for key in params:
        if not isinstance(key, str):
            raise SigningError(
                f"Query parameter names must be strings, got {type(key).__name__}",
                SigningErrorCodes.INVALID_QUERY,
                {"key": repr(key)}
            )
    
    pairs = []
    for key in sorted(params):
        value = params[key]
        if value is None:
            continue
        pairs.append(f"{encode_query_component(key)}={encode_query_component(_query_value(value))}")
    
    return "&".join(pairs)


def serialize_body(payload: Any) -> str:
    """
    Serialize a request body to compact JSON.
    
    Model attributes are written with snake_case names, null fields are left
    out and non-ASCII characters are kept as-is.
    
    Args:
        payload: ApiModel, mapping, list or scalar (None means no body)
        
    Returns:
        str: JSON text, or empty string when there is no body
        
    Raises:
        SigningError: If the payload cannot be serialized
    """
    if payload is None:
        return ""
    
    try:
        return json.dumps(
            to_serializable(payload),
            ensure_ascii=False,
            separators=(',', ':'),
        )
    except (TypeError, ValueError) as e:
        raise SigningError(
            f"Request body serialization failed: {e}",
            SigningErrorCodes.SERIALIZATION_FAILED,
            {"payload_type": type(payload).__name__}
        )

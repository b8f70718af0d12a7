"""
Canonical string construction for request authentication

The server recomputes the signature from the same four components, so the
order and the absence of delimiters are part of the protocol.
"""

from typing import Optional


def build_canonical_string(
    api_key: str,
    timestamp: str,
    query_string: Optional[str] = None,
    body_text: Optional[str] = None
) -> str:
    """
    Build the canonical string for signing.
    
    Args:
        api_key: Public API key
        timestamp: HTTP-date sent in the Date header
        query_string: Canonical query string (may be empty)
        body_text: Serialized request body (may be empty)
        
    Returns:
        str: ``api_key + timestamp + query_string + body_text``
    """
    return f"{api_key}{timestamp}{query_string or ''}{body_text or ''}"

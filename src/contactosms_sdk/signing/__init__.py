"""
ContactoSMS Python SDK - Request Signing Module

HMAC-SHA1 request authentication for the ContactoSMS REST API, together with
the canonical query and body encoders whose output is both signed and sent.
"""

from .types import (
    AUTH_SCHEME,
    ORIGIN_HEADER,
    ORIGIN_VALUE,
    HttpMethod,
    Credential,
    SignatureResult,
    SigningError,
    SigningErrorCodes,
)

from .hmac_signer import (
    HmacSigner,
    create_signer,
    sign_canonical_string,
)

from .canonical_message import build_canonical_string

from .encoding import (
    canonicalize_query,
    encode_query_component,
    serialize_body,
)

from .utils import (
    generate_timestamp,
    format_http_date,
    validate_http_date,
    parse_base_url,
)

# Public API exports
__all__ = [
    # Core signing functionality
    'HmacSigner',
    'create_signer',
    'sign_canonical_string',
    'build_canonical_string',
    # Types
    'AUTH_SCHEME',
    'ORIGIN_HEADER',
    'ORIGIN_VALUE',
    'HttpMethod',
    'Credential',
    'SignatureResult',
    'SigningError',
    'SigningErrorCodes',
    # Encoding
    'canonicalize_query',
    'encode_query_component',
    'serialize_body',
    # Utilities
    'generate_timestamp',
    'format_http_date',
    'validate_http_date',
    'parse_base_url',
]

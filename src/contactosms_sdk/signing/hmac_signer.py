"""
HMAC-SHA1 request signer

This module provides the signer that authenticates ContactoSMS API requests.
The signature is a base64-encoded HMAC-SHA1 over the canonical string, keyed
with the account secret.
"""

import base64
import hashlib
import hmac
from typing import Optional

from .types import (
    AUTH_SCHEME,
    Credential,
    SignatureResult,
    SigningError,
    SigningErrorCodes,
)
from .utils import format_http_date, validate_http_date
from .canonical_message import build_canonical_string


def sign_canonical_string(canonical_string: str, secret_key: str) -> str:
    """
    Compute the base64 HMAC-SHA1 signature of a canonical string.
    
    Args:
        canonical_string: String to sign
        secret_key: Shared secret
        
    Returns:
        str: Base64-encoded signature
    """
    digest = hmac.new(
        secret_key.encode('utf-8'),
        canonical_string.encode('utf-8'),
        hashlib.sha1
    ).digest()
    return base64.b64encode(digest).decode('ascii')


class HmacSigner:
    """
    Request signer bound to one credential.
    
    The signer holds no mutable state and can be shared between concurrent
    requests.
    """
    
    def __init__(self, credential: Credential):
        """
        Initialize the signer.
        
        Args:
            credential: API key and secret
            
        Raises:
            SigningError: If credential is not a Credential instance
        """
        if not isinstance(credential, Credential):
            raise SigningError(
                "credential must be a Credential instance",
                SigningErrorCodes.INVALID_API_KEY
            )
        self._credential = credential
    
    @property
    def api_key(self) -> str:
        return self._credential.api_key
    
    def sign(
        self,
        query_string: str = "",
        body_text: str = "",
        timestamp: Optional[str] = None
    ) -> SignatureResult:
        """
        Sign request components.
        
        Args:
            query_string: Canonical query string
            body_text: Serialized body
            timestamp: HTTP-date to sign; generated now when omitted
            
        Returns:
            SignatureResult: Signature, signed timestamp and Authorization value
            
        Raises:
            SigningError: If the supplied timestamp is not an HTTP-date
        """
        if timestamp is None:
            timestamp = format_http_date()
        elif not validate_http_date(timestamp):
            raise SigningError(
                f"Invalid HTTP-date timestamp: {timestamp}",
                SigningErrorCodes.INVALID_TIMESTAMP,
                {"timestamp": timestamp}
            )
        
        canonical = build_canonical_string(
            self._credential.api_key, timestamp, query_string, body_text
        )
        signature = sign_canonical_string(canonical, self._credential.secret_key)
        
        return SignatureResult(
            canonical_string=canonical,
            signature=signature,
            timestamp=timestamp,
            authorization=f"{AUTH_SCHEME} {self._credential.api_key}:{signature}"
        )


def create_signer(api_key: str, secret_key: str) -> HmacSigner:
    """
    Create a signer from raw key material.
    
    Args:
        api_key: Public API key
        secret_key: Shared secret
        
    Returns:
        HmacSigner: Configured signer
    """
    return HmacSigner(Credential(api_key=api_key, secret_key=secret_key))

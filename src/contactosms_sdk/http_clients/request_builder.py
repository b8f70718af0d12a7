"""
Signed request construction

Builds fully authenticated requests: the body and query are encoded once, the
same strings are signed and transmitted, and the resulting request is frozen.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from ..exceptions import ConfigurationError, ValidationError
from ..signing import (
    ORIGIN_HEADER,
    ORIGIN_VALUE,
    HmacSigner,
    HttpMethod,
    SignatureResult,
    SigningError,
    canonicalize_query,
    parse_base_url,
    serialize_body,
)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


@dataclass(frozen=True)
class PreparedRequest:
    """
    Signed request ready for transmission
    
    Attributes:
        method: HTTP method
        url: Absolute request URL
        path: Endpoint path relative to the base URL
        headers: Read-only request headers
        body: Serialized JSON body (empty when there is none)
        query_string: Canonical query string that was signed
        signature: Signing result the headers were derived from
    """
    method: HttpMethod
    url: str
    path: str
    headers: Mapping[str, str]
    body: str = ""
    query_string: str = ""
    signature: Optional[SignatureResult] = field(default=None, repr=False)
    
    @property
    def content(self) -> Optional[bytes]:
        """Body bytes as sent on the wire"""
        return self.body.encode('utf-8') if self.body else None


def _normalize_method(method: Union[HttpMethod, str]) -> HttpMethod:
    if isinstance(method, HttpMethod):
        return method
    try:
        return HttpMethod(str(method).upper())
    except ValueError:
        raise ValidationError(f"Unsupported HTTP method: {method}", "INVALID_METHOD")


class RequestBuilder:
    """
    Assembles signed requests against one base URL.
    """
    
    def __init__(self, base_url: str, signer: HmacSigner, origin: str = ORIGIN_VALUE):
        """
        Initialize the builder.
        
        Args:
            base_url: Absolute API base URL
            signer: Signer bound to the client credential
            origin: Value of the client identification header
            
        Raises:
            ConfigurationError: If base_url is missing or not absolute
        """
        try:
            parts = parse_base_url(base_url)
        except SigningError as e:
            raise ConfigurationError(f"Invalid API base URL: {base_url!r}", details=e.details)
        
        self.base_url = parts['origin'] + parts['pathname']
        self.signer = signer
        self.origin = origin
    
    def build(
        self,
        path: str,
        method: Union[HttpMethod, str] = HttpMethod.GET,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        add_params_to_query: bool = False,
        timestamp: Optional[str] = None
    ) -> PreparedRequest:
        """
        Build and sign a request.
        
        Parameters are always part of the signed canonical string; they are
        appended to the URL only when ``add_params_to_query`` is set.
        
        Args:
            path: Endpoint path relative to the base URL
            method: HTTP method
            params: Query parameters
            body: Request body (ApiModel, mapping or list)
            add_params_to_query: Append the canonical query string to the URL
            timestamp: HTTP-date to sign (generated when omitted)
            
        Returns:
            PreparedRequest: Signed, immutable request
            
        Raises:
            ValidationError: If path or method is invalid
            SigningError: If the body or parameters cannot be encoded
        """
        if not isinstance(path, str) or not path.strip():
            raise ValidationError("Endpoint path cannot be empty", "INVALID_PATH")
        
        http_method = _normalize_method(method)
        relative_path = path.strip().lstrip('/')
        
        body_text = serialize_body(body)
        query_string = canonicalize_query(params)
        
        url = self.base_url + relative_path
        if add_params_to_query and query_string:
            url += ('&' if '?' in url else '?') + query_string
        
        signature = self.signer.sign(query_string, body_text, timestamp)
        
        headers = {
            'Authorization': signature.authorization,
            'Date': signature.timestamp,
            ORIGIN_HEADER: self.origin,
            'Accept': 'application/json',
        }
        if body is not None:
            headers['Content-Type'] = JSON_CONTENT_TYPE
        
        return PreparedRequest(
            method=http_method,
            url=url,
            path=relative_path,
            headers=MappingProxyType(headers),
            body=body_text,
            query_string=query_string,
            signature=signature,
        )

"""
Unit tests for HMAC-SHA1 request signing
"""

import base64
import hashlib
import hmac
from datetime import datetime, timezone

import pytest

from contactosms_sdk.signing import (
    HmacSigner,
    Credential,
    SigningError,
    SigningErrorCodes,
    build_canonical_string,
    create_signer,
    format_http_date,
    parse_base_url,
    sign_canonical_string,
    validate_http_date,
)

API_KEY = "test-api-key"
SECRET_KEY = "test-secret-key"
FIXED_DATE = "Mon, 15 Jan 2024 10:30:00 GMT"


def reference_signature(secret: str, message: str) -> str:
    digest = hmac.new(secret.encode('utf-8'), message.encode('utf-8'), hashlib.sha1).digest()
    return base64.b64encode(digest).decode('ascii')


class TestCanonicalString:
    """Test canonical string construction"""
    
    def test_concatenates_without_delimiters(self):
        """Components are joined in order with nothing in between"""
        result = build_canonical_string(API_KEY, FIXED_DATE, "a=1&b=2", '{"x":1}')
        assert result == API_KEY + FIXED_DATE + "a=1&b=2" + '{"x":1}'
    
    def test_empty_components(self):
        """Missing query and body contribute nothing"""
        assert build_canonical_string(API_KEY, FIXED_DATE) == API_KEY + FIXED_DATE
        assert build_canonical_string(API_KEY, FIXED_DATE, "", "") == API_KEY + FIXED_DATE


class TestSignCanonicalString:
    """Test the raw signature primitive"""
    
    def test_matches_reference_hmac(self):
        """Signature is base64 HMAC-SHA1 keyed with the secret"""
        message = API_KEY + FIXED_DATE + "q=1"
        assert sign_canonical_string(message, SECRET_KEY) == reference_signature(SECRET_KEY, message)
    
    def test_signature_length(self):
        """A SHA-1 digest encodes to 28 base64 characters"""
        signature = sign_canonical_string("anything", SECRET_KEY)
        assert len(signature) == 28
        assert len(base64.b64decode(signature)) == 20
    
    def test_deterministic(self):
        """Identical inputs give identical signatures"""
        assert sign_canonical_string("abc", SECRET_KEY) == sign_canonical_string("abc", SECRET_KEY)
    
    def test_single_character_change(self):
        """Changing one character of any input changes the signature"""
        base = sign_canonical_string("abc", SECRET_KEY)
        assert sign_canonical_string("abd", SECRET_KEY) != base
        assert sign_canonical_string("abc", SECRET_KEY + "x") != base
    
    def test_utf8_input(self):
        """Non-ASCII text is signed as UTF-8"""
        message = '{"message":"áéíóú ÁÉÍÓÚ ñÑ"}'
        assert sign_canonical_string(message, SECRET_KEY) == reference_signature(SECRET_KEY, message)


class TestHmacSigner:
    """Test the credential-bound signer"""
    
    def setup_method(self):
        self.signer = create_signer(API_KEY, SECRET_KEY)
    
    def test_sign_with_timestamp(self):
        """The supplied timestamp is signed and returned unchanged"""
        result = self.signer.sign("a=1", '{"b":2}', FIXED_DATE)
        
        expected_canonical = API_KEY + FIXED_DATE + "a=1" + '{"b":2}'
        assert result.timestamp == FIXED_DATE
        assert result.canonical_string == expected_canonical
        assert result.signature == reference_signature(SECRET_KEY, expected_canonical)
    
    def test_authorization_header(self):
        """Authorization uses the IM scheme with key and signature"""
        result = self.signer.sign(timestamp=FIXED_DATE)
        assert result.authorization == f"IM {API_KEY}:{result.signature}"
        assert result.headers == {'Authorization': result.authorization, 'Date': FIXED_DATE}
    
    def test_generated_timestamp(self):
        """Without a timestamp the current HTTP-date is used"""
        result = self.signer.sign()
        assert validate_http_date(result.timestamp)
    
    def test_invalid_timestamp(self):
        """Timestamps that are not HTTP-dates are rejected"""
        with pytest.raises(SigningError) as exc_info:
            self.signer.sign(timestamp="2024-01-15T10:30:00Z")
        assert exc_info.value.code == SigningErrorCodes.INVALID_TIMESTAMP
    
    def test_secret_not_in_repr(self):
        """Neither the secret nor the canonical string leak through repr"""
        result = self.signer.sign(timestamp=FIXED_DATE)
        assert SECRET_KEY not in repr(result)
        assert SECRET_KEY not in repr(Credential(API_KEY, SECRET_KEY))
    
    def test_requires_credential(self):
        """The signer only accepts Credential instances"""
        with pytest.raises(SigningError):
            HmacSigner((API_KEY, SECRET_KEY))
    
    def test_api_key_property(self):
        assert self.signer.api_key == API_KEY


class TestCredential:
    """Test credential validation"""
    
    def test_blank_api_key(self):
        with pytest.raises(SigningError) as exc_info:
            Credential("  ", SECRET_KEY)
        assert exc_info.value.code == SigningErrorCodes.INVALID_API_KEY
    
    def test_blank_secret(self):
        with pytest.raises(SigningError) as exc_info:
            Credential(API_KEY, "")
        assert exc_info.value.code == SigningErrorCodes.INVALID_SECRET_KEY
    
    def test_masked_api_key(self):
        assert Credential("abcdefgh", SECRET_KEY).masked_api_key == "****efgh"
        assert Credential("abc", SECRET_KEY).masked_api_key == "****"


class TestSigningUtils:
    """Test date and URL helpers"""
    
    def test_format_http_date(self):
        """Dates use the RFC 7231 fixed format in GMT"""
        moment = datetime(1994, 11, 6, 8, 49, 37, tzinfo=timezone.utc)
        assert format_http_date(moment) == "Sun, 06 Nov 1994 08:49:37 GMT"
    
    def test_format_http_date_naive_is_utc(self):
        assert format_http_date(datetime(1994, 11, 6, 8, 49, 37)) == "Sun, 06 Nov 1994 08:49:37 GMT"
    
    def test_validate_http_date(self):
        assert validate_http_date(FIXED_DATE)
        assert not validate_http_date("Mon, 15 Jan 2024 10:30:00 +0000")
        assert not validate_http_date("not a date GMT")
        assert not validate_http_date(None)
    
    def test_parse_base_url(self):
        """Base URLs always end with a slash"""
        parts = parse_base_url("https://api.example.com/v1")
        assert parts == {"origin": "https://api.example.com", "pathname": "/v1/"}
        assert parse_base_url("http://localhost:8080")["pathname"] == "/"
    
    @pytest.mark.parametrize("url", ["", "api.example.com", "ftp://api.example.com/"])
    def test_parse_base_url_invalid(self, url):
        with pytest.raises(SigningError) as exc_info:
            parse_base_url(url)
        assert exc_info.value.code == SigningErrorCodes.INVALID_URL

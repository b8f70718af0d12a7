"""
Shared plumbing for resource services
"""

from datetime import date, datetime
from typing import Any, Dict, Optional, Union

from ..exceptions import ValidationError

ClientLike = Any  # ApiClient or RetryingApiClient

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"


class BaseService:
    """Base class for services issuing calls through an API client"""
    
    def __init__(self, client: ClientLike):
        if client is None:
            raise ValidationError("client cannot be None", "INVALID_CLIENT")
        self.client = client
    
    @property
    def config(self):
        return self.client.config


def require_text(value: Optional[str], name: str) -> str:
    """Reject missing or blank string arguments"""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} cannot be null or empty", "INVALID_ARGUMENT",
                              {'argument': name})
    return value


def format_datetime(value: Union[datetime, date, str], fmt: str = DATETIME_FORMAT) -> str:
    """Format a date for query or body use; strings are passed through"""
    if isinstance(value, str):
        return value
    if isinstance(value, (datetime, date)):
        return value.strftime(fmt)
    raise ValidationError(f"Expected a date or datetime, got {type(value).__name__}",
                          "INVALID_ARGUMENT")


def drop_none(values: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}

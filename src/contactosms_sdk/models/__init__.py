"""
Payload models for the ContactoSMS SDK

Dataclass request and response models plus the conversion helpers used by the
body encoder and the response interpreter.
"""

from .base import (
    ApiModel,
    json_field,
    to_snake_case,
    to_serializable,
    convert_value,
)
from .enums import (
    MessageDirection,
    MessageStatus,
    MessageSentFrom,
    RepeatInterval,
    ContactStatus,
    ShortlinkStatus,
)
from .responses import (
    ErrorResponse,
    RecipientResponse,
    MessageResponse,
    MessageGroup,
    ScheduleMessageResponse,
    InboxMessageResponse,
    ActionMessageResponse,
    ContactResponse,
    TagResponse,
    ShortlinkResponse,
)
from .payloads import (
    SendToContactRequest,
    SendToGroupsRequest,
    AddScheduleRequest,
    RemoveScheduleRequest,
    CreateShortlinkRequest,
    UpdateShortlinkStatusRequest,
)

__all__ = [
    # Base
    'ApiModel',
    'json_field',
    'to_snake_case',
    'to_serializable',
    'convert_value',
    # Enums
    'MessageDirection',
    'MessageStatus',
    'MessageSentFrom',
    'RepeatInterval',
    'ContactStatus',
    'ShortlinkStatus',
    # Responses
    'ErrorResponse',
    'RecipientResponse',
    'MessageResponse',
    'MessageGroup',
    'ScheduleMessageResponse',
    'InboxMessageResponse',
    'ActionMessageResponse',
    'ContactResponse',
    'TagResponse',
    'ShortlinkResponse',
    # Request bodies
    'SendToContactRequest',
    'SendToGroupsRequest',
    'AddScheduleRequest',
    'RemoveScheduleRequest',
    'CreateShortlinkRequest',
    'UpdateShortlinkStatusRequest',
]

"""
Response models for the ContactoSMS REST API

Wire names follow the server's snake_case JSON; attributes whose Python name
differs from the wire name are declared with ``json_field``.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .base import ApiModel, json_field
from .enums import (
    ContactStatus,
    MessageDirection,
    MessageSentFrom,
    MessageStatus,
    ShortlinkStatus,
)


@dataclass
class ErrorResponse(ApiModel):
    """Error body returned with non-success HTTP statuses"""
    code: Optional[int] = None
    error: Optional[str] = None


@dataclass
class RecipientResponse(ApiModel):
    """Single recipient of a sent message"""
    msisdn: Optional[str] = None
    country_code: Optional[str] = json_field('country', default=None)
    status: Optional[MessageStatus] = None


@dataclass
class MessageResponse(ApiModel):
    """Sent message as reported by the server"""
    message_id: Optional[int] = None
    short_code: Optional[str] = None
    message_type_id: Optional[int] = json_field('type', default=None)
    direction: Optional[MessageDirection] = None
    status: Optional[MessageStatus] = None
    sent_from: Optional[MessageSentFrom] = None
    client_message_id: Optional[str] = json_field('id', default=None)
    message: Optional[str] = None
    sent_count: Optional[int] = None
    error_count: Optional[int] = None
    total_recipients: Optional[int] = None
    msisdn: Optional[str] = None
    country_code: Optional[str] = json_field('country', default=None)
    billable: Optional[bool] = json_field('is_billable', default=None)
    scheduled: Optional[bool] = json_field('is_scheduled', default=None)
    created_on: Optional[datetime] = None
    created_by: Optional[str] = None
    total_monitors: Optional[int] = None
    groups: List[str] = field(default_factory=list)
    recipients: List[RecipientResponse] = field(default_factory=list)


@dataclass
class MessageGroup(ApiModel):
    """Group reference inside a scheduled message"""
    short_name: Optional[str] = None


@dataclass
class ScheduleMessageResponse(ApiModel):
    """Scheduled (recurring) message"""
    id: Optional[int] = None
    name: Optional[str] = None
    frequency: Optional[str] = None
    message: Optional[str] = None
    date_expires: Optional[datetime] = None
    groups: List[MessageGroup] = field(default_factory=list)


@dataclass
class InboxMessageResponse(ApiModel):
    """Incoming message in the account inbox"""
    status: Optional[str] = None
    msisdn: Optional[str] = None
    datetime: Optional[str] = None
    message: Optional[str] = None
    message_id: Optional[str] = None
    short_number: Optional[str] = None
    created_on: Optional[str] = None
    is_deleted: Optional[int] = None


@dataclass
class ActionMessageResponse(ApiModel):
    """Generic acknowledgement returned by mutating endpoints"""
    result: Optional[str] = None


@dataclass
class ContactResponse(ApiModel):
    """Contact as returned by contact listing endpoints"""
    msisdn: Optional[str] = None
    phone_number: Optional[str] = None
    country_code: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    status: Optional[ContactStatus] = None
    added_from: Optional[str] = None
    custom_field_1: Optional[str] = None
    custom_field_2: Optional[str] = None
    custom_field_3: Optional[str] = None
    custom_field_4: Optional[str] = None
    custom_field_5: Optional[str] = None
    tags: List[str] = field(default_factory=list)


@dataclass
class TagResponse(ApiModel):
    """Contact tag"""
    tag_name: Optional[str] = None
    description: Optional[str] = None
    total_contacts: Optional[int] = None


@dataclass
class ShortlinkResponse(ApiModel):
    """
    Shortlink resource.
    
    Some endpoints only return ``id``; ``url_id`` falls back to it so callers
    can always rely on ``url_id``.
    """
    id: Optional[str] = None
    url_id: Optional[str] = None
    name: Optional[str] = None
    alias: Optional[str] = None
    short_url: Optional[str] = None
    long_url: Optional[str] = None
    status: Optional[ShortlinkStatus] = None
    created_by: Optional[str] = None
    created_on: Optional[str] = None
    
    def __post_init__(self):
        if not (self.url_id or "").strip():
            self.url_id = self.id

"""
Request body models for the ContactoSMS REST API
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .base import ApiModel
from .enums import ShortlinkStatus


@dataclass
class SendToContactRequest(ApiModel):
    """Body of ``messages/send_to_contact``"""
    msisdn: str
    message: str
    id: Optional[str] = None


@dataclass
class SendToGroupsRequest(ApiModel):
    """Body of ``messages/send``"""
    groups: List[str]
    message: str
    id: Optional[str] = None


@dataclass
class AddScheduleRequest(ApiModel):
    """Body of ``POST messages/scheduled``; dates are ``YYYY-MM-DD``"""
    start_date: str
    end_date: str
    name: str
    message: str
    time: str
    frequency: str
    groups: List[str] = field(default_factory=list)


@dataclass
class RemoveScheduleRequest(ApiModel):
    """Body of ``DELETE messages/scheduled``"""
    message_id: str


@dataclass
class CreateShortlinkRequest(ApiModel):
    """Body of ``POST short_link``"""
    long_url: str
    name: Optional[str] = None
    status: ShortlinkStatus = ShortlinkStatus.ACTIVE
    alias: Optional[str] = None


@dataclass
class UpdateShortlinkStatusRequest(ApiModel):
    """Body of ``PUT short_link/{id}/status``"""
    status: ShortlinkStatus

"""
Enumerations used by API payloads
"""

from enum import Enum


class MessageDirection(str, Enum):
    """Message direction"""
    MO = "MO"   # Mobile originated (incoming)
    MT = "MT"   # Mobile terminated (outgoing)


class MessageStatus(str, Enum):
    """Delivery status of a message or recipient"""
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    READY = "READY"
    SENT = "SENT"
    UNREAD = "UNREAD"
    READ = "READ"
    REPLIED = "REPLIED"
    FORWARDED = "FORWARDED"
    ERROR = "ERROR"


class MessageSentFrom(str, Enum):
    """Channel a message was sent from"""
    WEB = "WEB"
    API_HTTP = "API_HTTP"
    API_REST = "API_REST"
    SMS = "SMS"
    SYSTEM = "SYSTEM"
    SCHEDULER = "SCHEDULER"


class RepeatInterval(str, Enum):
    """Repeat interval for scheduled messages"""
    MONTHLY = "MONTHLY"
    WEEKLY = "WEEKLY"
    DAILY = "DAILY"
    HOURLY = "HOURLY"
    ONCE = "ONCE"


class ContactStatus(str, Enum):
    """Subscription status of a contact"""
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    BLOCKED = "BLOCKED"


class ShortlinkStatus(str, Enum):
    """Shortlink activation status"""
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

"""
Resource services for the ContactoSMS API
"""

from .base import BaseService
from .messages import MessagesService
from .tags import TagsService
from .shortlinks import ShortlinksService

__all__ = [
    'BaseService',
    'MessagesService',
    'TagsService',
    'ShortlinksService',
]

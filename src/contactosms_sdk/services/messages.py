"""
Message operations

Sending to contacts and groups, message history, scheduled messages and the
inbox of incoming messages.
"""

import asyncio
import logging
from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from ..http_clients import ApiResponse
from ..models import (
    ActionMessageResponse,
    AddScheduleRequest,
    InboxMessageResponse,
    MessageDirection,
    MessageResponse,
    RemoveScheduleRequest,
    ScheduleMessageResponse,
    SendToContactRequest,
    SendToGroupsRequest,
)
from ..signing import HttpMethod
from .base import DATE_FORMAT, BaseService, drop_none, format_datetime, require_text

logger = logging.getLogger(__name__)

DateLike = Union[datetime, date, str]


class MessagesService(BaseService):
    """Message endpoints of the ContactoSMS API"""
    
    async def get_list(
        self,
        start_date: Optional[DateLike] = None,
        end_date: Optional[DateLike] = None,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        msisdn: Optional[str] = None,
        short_name: Optional[str] = None,
        include_recipients: bool = False,
        direction: MessageDirection = MessageDirection.MT,
        username: Optional[str] = None,
        cancel_event: Optional[asyncio.Event] = None
    ) -> ApiResponse[List[MessageResponse]]:
        """
        List sent or received messages.
        
        Args:
            start_date: Lower bound of the creation date
            end_date: Upper bound of the creation date
            start: Offset of the first result
            limit: Maximum number of results
            msisdn: Only messages for this phone number
            short_name: Only messages for this group
            include_recipients: Include recipient details
            direction: MT for outgoing, MO for incoming
            username: Only messages created by this user
            cancel_event: Event that aborts the call when set
            
        Returns:
            ApiResponse: List of messages
        """
        params = drop_none({
            'start_date': format_datetime(start_date) if start_date is not None else None,
            'end_date': format_datetime(end_date) if end_date is not None else None,
            'start': start,
            'limit': limit,
            'msisdn': msisdn or None,
            'short_name': short_name or None,
            'user': username or None,
        })
        params['direction'] = MessageDirection(direction).value
        params['include_recipients'] = bool(include_recipients)
        
        logger.debug(f"Getting message list with {len(params)} parameters")
        
        return await self.client.execute(
            "messages", HttpMethod.GET,
            params=params,
            add_params_to_query=True,
            response_type=List[MessageResponse],
            timeout=self.config.message_query_timeout,
            cancel_event=cancel_event,
        )
    
    async def send_to_groups(
        self,
        short_names: Sequence[str],
        message: str,
        message_id: Optional[str] = None,
        cancel_event: Optional[asyncio.Event] = None
    ) -> ApiResponse[MessageResponse]:
        """
        Send a message to one or more groups.
        
        Args:
            short_names: Short names of the target groups
            message: Message text
            message_id: Client-side message identifier
            cancel_event: Event that aborts the call when set
        """
        body = SendToGroupsRequest(groups=list(short_names), message=message, id=message_id or None)
        logger.debug(f"Sending message to {len(body.groups)} groups")
        
        return await self.client.execute(
            "messages/send", HttpMethod.POST,
            body=body,
            response_type=MessageResponse,
            cancel_event=cancel_event,
        )
    
    async def send_to_contact(
        self,
        msisdn: str,
        message: str,
        message_id: Optional[str] = None,
        cancel_event: Optional[asyncio.Event] = None
    ) -> ApiResponse[MessageResponse]:
        """
        Send a message to a single phone number.
        
        Args:
            msisdn: Destination phone number
            message: Message text
            message_id: Client-side message identifier
            cancel_event: Event that aborts the call when set
        """
        body = SendToContactRequest(msisdn=msisdn, message=message, id=message_id or None)
        logger.debug(f"Sending message to contact {msisdn}")
        
        return await self.client.execute(
            "messages/send_to_contact", HttpMethod.POST,
            body=body,
            response_type=MessageResponse,
            cancel_event=cancel_event,
        )
    
    async def get_schedule(
        self,
        cancel_event: Optional[asyncio.Event] = None
    ) -> ApiResponse[List[ScheduleMessageResponse]]:
        """List scheduled messages"""
        logger.debug("Getting scheduled messages")
        
        return await self.client.execute(
            "messages/scheduled", HttpMethod.GET,
            response_type=List[ScheduleMessageResponse],
            cancel_event=cancel_event,
        )
    
    async def add_schedule(
        self,
        start_date: DateLike,
        end_date: DateLike,
        name: str,
        message: str,
        time: str,
        frequency: str,
        groups: Sequence[str],
        cancel_event: Optional[asyncio.Event] = None
    ) -> ApiResponse[ActionMessageResponse]:
        """
        Schedule a recurring message for groups.
        
        Args:
            start_date: First day of the schedule
            end_date: Last day of the schedule
            name: Schedule name
            message: Message text
            time: Time of day the message is sent
            frequency: Repeat interval (see ``RepeatInterval``)
            groups: Short names of the target groups
            cancel_event: Event that aborts the call when set
        """
        body = AddScheduleRequest(
            start_date=format_datetime(start_date, DATE_FORMAT),
            end_date=format_datetime(end_date, DATE_FORMAT),
            name=name,
            message=message,
            time=time,
            frequency=getattr(frequency, 'value', frequency),
            groups=list(groups),
        )
        logger.debug(f"Adding scheduled message '{name}' for {len(body.groups)} groups")
        
        return await self.client.execute(
            "messages/scheduled", HttpMethod.POST,
            body=body,
            response_type=ActionMessageResponse,
            cancel_event=cancel_event,
        )
    
    async def remove_schedule(
        self,
        message_id: str,
        cancel_event: Optional[asyncio.Event] = None
    ) -> ApiResponse[ActionMessageResponse]:
        """Remove a scheduled message"""
        require_text(message_id, "message_id")
        logger.debug(f"Removing scheduled message {message_id}")
        
        return await self.client.execute(
            "messages/scheduled", HttpMethod.DELETE,
            body=RemoveScheduleRequest(message_id=message_id),
            response_type=ActionMessageResponse,
            cancel_event=cancel_event,
        )
    
    async def get_inbox(
        self,
        start_date: Optional[DateLike] = None,
        end_date: Optional[DateLike] = None,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        msisdn: Optional[str] = None,
        status: Optional[int] = None,
        cancel_event: Optional[asyncio.Event] = None
    ) -> ApiResponse[List[InboxMessageResponse]]:
        """
        List incoming messages.
        
        Args:
            start_date: Lower bound of the reception date
            end_date: Upper bound of the reception date
            start: Offset of the first result
            limit: Maximum number of results
            msisdn: Only messages from this phone number
            status: Only messages with this status code
            cancel_event: Event that aborts the call when set
        """
        params = drop_none({
            'start_date': format_datetime(start_date) if start_date is not None else None,
            'end_date': format_datetime(end_date) if end_date is not None else None,
            'start': start,
            'limit': limit,
            'msisdn': msisdn or None,
            'status': status,
        })
        logger.debug(f"Getting inbox messages with {len(params)} parameters")
        
        return await self.client.execute(
            "messages/inbox", HttpMethod.GET,
            params=params,
            add_params_to_query=True,
            response_type=List[InboxMessageResponse],
            timeout=self.config.message_query_timeout,
            cancel_event=cancel_event,
        )

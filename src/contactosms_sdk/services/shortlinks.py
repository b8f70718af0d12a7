"""
Shortlink operations

The list and lookup endpoints answer 404 when nothing matches. A listing
turns that into an empty success; a lookup by id reports it as a
"Shortlink not found" error.
"""

import asyncio
import logging
from http import HTTPStatus
from typing import List, Optional, Union

from ..http_clients import ApiResponse
from ..models import CreateShortlinkRequest, ShortlinkResponse, ShortlinkStatus, UpdateShortlinkStatusRequest
from ..signing import HttpMethod
from .base import BaseService, require_text

logger = logging.getLogger(__name__)

NOT_FOUND = int(HTTPStatus.NOT_FOUND)


def _is_not_found(result: ApiResponse) -> bool:
    return result.http_code == NOT_FOUND or result.error_code == NOT_FOUND


class ShortlinksService(BaseService):
    """Shortlink endpoints of the ContactoSMS API"""
    
    async def get_list(
        self,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        shortlink_id: Optional[str] = None,
        cancel_event: Optional[asyncio.Event] = None
    ) -> ApiResponse[List[ShortlinkResponse]]:
        """
        List shortlinks.
        
        When ``shortlink_id`` is given the date and paging filters are ignored.
        
        Args:
            start_date: Lower bound of the creation date
            end_date: Upper bound of the creation date
            limit: Maximum number of results (ignored unless positive)
            offset: Offset of the first result (ignored when negative)
            shortlink_id: Only the shortlink with this id
            cancel_event: Event that aborts the call when set
            
        Returns:
            ApiResponse: Shortlinks; an empty list when none exist
        """
        params = {}
        if shortlink_id and shortlink_id.strip():
            params['id'] = shortlink_id
        else:
            if start_date and start_date.strip():
                params['start_date'] = start_date
            if end_date and end_date.strip():
                params['end_date'] = end_date
            if limit is not None and limit > 0:
                params['limit'] = limit
            if offset is not None and offset >= 0:
                params['offset'] = offset
        
        logger.debug("Getting shortlinks list with filters")
        
        result = await self.client.execute(
            "short_link/", HttpMethod.GET,
            params=params,
            add_params_to_query=True,
            response_type=List[ShortlinkResponse],
            cancel_event=cancel_event,
        )
        
        if result.is_ok and result.data is not None:
            return result
        
        if _is_not_found(result):
            logger.warning("No shortlinks found")
            return ApiResponse.success([], result.response)
        
        return result
    
    async def get_by_id(
        self,
        shortlink_id: str,
        cancel_event: Optional[asyncio.Event] = None
    ) -> ApiResponse[ShortlinkResponse]:
        """Get a single shortlink by id"""
        require_text(shortlink_id, "shortlink_id")
        logger.debug(f"Getting shortlink by ID: {shortlink_id}")
        
        result = await self.client.execute(
            "short_link/", HttpMethod.GET,
            params={'id': shortlink_id},
            add_params_to_query=True,
            response_type=ShortlinkResponse,
            cancel_event=cancel_event,
        )
        
        if result.is_ok and result.data is not None:
            return result
        
        if _is_not_found(result):
            logger.warning(f"Shortlink not found: {shortlink_id}")
            return ApiResponse.error(NOT_FOUND, "Shortlink not found", NOT_FOUND, result.response)
        
        return result
    
    async def create(
        self,
        long_url: str,
        name: Optional[str] = None,
        status: Union[ShortlinkStatus, str] = ShortlinkStatus.ACTIVE,
        alias: Optional[str] = None,
        cancel_event: Optional[asyncio.Event] = None
    ) -> ApiResponse[ShortlinkResponse]:
        """
        Create a shortlink.
        
        Args:
            long_url: URL the shortlink redirects to
            name: Display name
            status: Initial status
            alias: Custom alias for the short URL
            cancel_event: Event that aborts the call when set
        """
        require_text(long_url, "long_url")
        body = CreateShortlinkRequest(
            long_url=long_url,
            name=name,
            status=ShortlinkStatus(status),
            alias=alias,
        )
        logger.debug(f"Creating shortlink: {long_url}, {name}, {body.status.value}")
        
        return await self.client.execute(
            "short_link", HttpMethod.POST,
            body=body,
            response_type=ShortlinkResponse,
            cancel_event=cancel_event,
        )
    
    async def update_status(
        self,
        shortlink_id: str,
        status: Union[ShortlinkStatus, str],
        cancel_event: Optional[asyncio.Event] = None
    ) -> ApiResponse[ShortlinkResponse]:
        """
        Activate or deactivate a shortlink.
        
        The id travels in the path; it is also part of the signed parameters
        without being repeated in the query string.
        """
        require_text(shortlink_id, "shortlink_id")
        body = UpdateShortlinkStatusRequest(status=ShortlinkStatus(status))
        logger.debug(f"Updating shortlink status: {shortlink_id}, {body.status.value}")
        
        return await self.client.execute(
            f"short_link/{shortlink_id}/status", HttpMethod.PUT,
            params={'id': shortlink_id},
            body=body,
            response_type=ShortlinkResponse,
            cancel_event=cancel_event,
        )

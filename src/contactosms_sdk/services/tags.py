"""
Tag operations
"""

import asyncio
import logging
from typing import List, Optional

from ..http_clients import ApiResponse
from ..models import ContactResponse, TagResponse
from ..signing import HttpMethod
from .base import BaseService, require_text

logger = logging.getLogger(__name__)


class TagsService(BaseService):
    """Tag endpoints of the ContactoSMS API"""
    
    async def get_list(self, cancel_event: Optional[asyncio.Event] = None) -> ApiResponse[List[TagResponse]]:
        """List all tags"""
        logger.debug("Getting tags list")
        
        return await self.client.execute(
            "tags", HttpMethod.GET,
            add_params_to_query=True,
            response_type=List[TagResponse],
            cancel_event=cancel_event,
        )
    
    async def get(self, tag_name: str, cancel_event: Optional[asyncio.Event] = None) -> ApiResponse[TagResponse]:
        """Get a single tag by name"""
        require_text(tag_name, "tag_name")
        logger.debug(f"Getting tag: {tag_name}")
        
        return await self.client.execute(
            f"tags/{tag_name}", HttpMethod.GET,
            params={'tag_name': tag_name},
            add_params_to_query=True,
            response_type=TagResponse,
            cancel_event=cancel_event,
        )
    
    async def delete(self, tag_name: str, cancel_event: Optional[asyncio.Event] = None) -> ApiResponse[TagResponse]:
        """Delete a tag by name"""
        require_text(tag_name, "tag_name")
        logger.debug(f"Deleting tag: {tag_name}")
        
        return await self.client.execute(
            f"tags/{tag_name}", HttpMethod.DELETE,
            params={'tag_name': tag_name},
            add_params_to_query=True,
            response_type=TagResponse,
            cancel_event=cancel_event,
        )
    
    async def get_contact_list(
        self,
        tag_name: str,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        cancel_event: Optional[asyncio.Event] = None
    ) -> ApiResponse[List[ContactResponse]]:
        """
        List the contacts carrying a tag.
        
        Args:
            tag_name: Tag to look up
            start: Offset of the first result (ignored when negative)
            limit: Maximum number of results (ignored unless positive)
            cancel_event: Event that aborts the call when set
        """
        require_text(tag_name, "tag_name")
        logger.debug(f"Getting contacts for tag: {tag_name}")
        
        params = {'tag_name': tag_name}
        if start is not None and start >= 0:
            params['start'] = start
        if limit is not None and limit > 0:
            params['limit'] = limit
        
        return await self.client.execute(
            f"tags/{tag_name}/contacts", HttpMethod.GET,
            params=params,
            add_params_to_query=True,
            response_type=List[ContactResponse],
            cancel_event=cancel_event,
        )

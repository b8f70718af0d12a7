"""
Tests for the resource services
"""

from datetime import date, datetime
from typing import List
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from contactosms_sdk import SmsApi
from contactosms_sdk.exceptions import ValidationError
from contactosms_sdk.http_clients import ApiResponse, HttpxTransport, RetryingApiClient
from contactosms_sdk.models import (
    ActionMessageResponse,
    ContactResponse,
    MessageDirection,
    MessageResponse,
    ShortlinkResponse,
    ShortlinkStatus,
    TagResponse,
)
from contactosms_sdk.services import MessagesService, ShortlinksService, TagsService
from contactosms_sdk.signing import HttpMethod


@pytest.fixture
def client(config):
    """API client double recording execute calls"""
    client = Mock()
    client.config = config
    client.execute = AsyncMock(return_value=ApiResponse.success(None))
    return client


def call_of(client):
    args, kwargs = client.execute.call_args
    return args, kwargs


class TestMessagesService:
    """Test message endpoints"""
    
    @pytest.mark.asyncio
    async def test_get_list_defaults(self, client, config):
        await MessagesService(client).get_list()
        
        args, kwargs = call_of(client)
        assert args == ("messages", HttpMethod.GET)
        assert kwargs['params'] == {'direction': 'MT', 'include_recipients': False}
        assert kwargs['add_params_to_query'] is True
        assert kwargs['response_type'] == List[MessageResponse]
        assert kwargs['timeout'] == config.message_query_timeout
    
    @pytest.mark.asyncio
    async def test_get_list_filters(self, client):
        await MessagesService(client).get_list(
            start_date=datetime(2024, 1, 15, 8, 0, 0),
            end_date="2024-01-31 23:59:59",
            start=0,
            limit=50,
            msisdn="50212345678",
            short_name="vip",
            include_recipients=True,
            direction=MessageDirection.MO,
            username="admin",
        )
        
        _, kwargs = call_of(client)
        assert kwargs['params'] == {
            'start_date': "2024-01-15 08:00:00",
            'end_date': "2024-01-31 23:59:59",
            'start': 0,
            'limit': 50,
            'msisdn': "50212345678",
            'short_name': "vip",
            'user': "admin",
            'direction': "MO",
            'include_recipients': True,
        }
    
    @pytest.mark.asyncio
    async def test_send_to_contact(self, client):
        await MessagesService(client).send_to_contact("50212345678", "Hola", message_id="abc")
        
        args, kwargs = call_of(client)
        assert args == ("messages/send_to_contact", HttpMethod.POST)
        assert kwargs['body'].to_dict() == {'msisdn': "50212345678", 'message': "Hola", 'id': "abc"}
        assert kwargs['response_type'] is MessageResponse
    
    @pytest.mark.asyncio
    async def test_send_to_groups(self, client):
        await MessagesService(client).send_to_groups(("a", "b"), "Hola")
        
        args, kwargs = call_of(client)
        assert args == ("messages/send", HttpMethod.POST)
        assert kwargs['body'].to_dict() == {'groups': ["a", "b"], 'message': "Hola"}
    
    @pytest.mark.asyncio
    async def test_add_schedule(self, client):
        await MessagesService(client).add_schedule(
            date(2024, 2, 1), datetime(2024, 3, 1, 12, 0), "promo", "Hola", "10:00", "WEEKLY", ["vip"]
        )
        
        args, kwargs = call_of(client)
        assert args == ("messages/scheduled", HttpMethod.POST)
        assert kwargs['body'].to_dict() == {
            'start_date': "2024-02-01",
            'end_date': "2024-03-01",
            'name': "promo",
            'message': "Hola",
            'time': "10:00",
            'frequency': "WEEKLY",
            'groups': ["vip"],
        }
        assert kwargs['response_type'] is ActionMessageResponse
    
    @pytest.mark.asyncio
    async def test_remove_schedule(self, client):
        await MessagesService(client).remove_schedule("99")
        
        args, kwargs = call_of(client)
        assert args == ("messages/scheduled", HttpMethod.DELETE)
        assert kwargs['body'].to_dict() == {'message_id': "99"}
    
    @pytest.mark.asyncio
    async def test_remove_schedule_requires_id(self, client):
        with pytest.raises(ValidationError):
            await MessagesService(client).remove_schedule(" ")
        client.execute.assert_not_called()
    
    @pytest.mark.asyncio
    async def test_get_schedule(self, client):
        await MessagesService(client).get_schedule()
        args, _ = call_of(client)
        assert args == ("messages/scheduled", HttpMethod.GET)
    
    @pytest.mark.asyncio
    async def test_get_inbox(self, client):
        await MessagesService(client).get_inbox(limit=5, status=1)
        
        args, kwargs = call_of(client)
        assert args == ("messages/inbox", HttpMethod.GET)
        assert kwargs['params'] == {'limit': 5, 'status': 1}
        assert kwargs['add_params_to_query'] is True
    
    def test_requires_client(self):
        with pytest.raises(ValidationError):
            MessagesService(None)


class TestTagsService:
    """Test tag endpoints"""
    
    @pytest.mark.asyncio
    async def test_get_list(self, client):
        await TagsService(client).get_list()
        args, kwargs = call_of(client)
        assert args == ("tags", HttpMethod.GET)
        assert kwargs['response_type'] == List[TagResponse]
    
    @pytest.mark.asyncio
    async def test_get(self, client):
        await TagsService(client).get("vip")
        args, kwargs = call_of(client)
        assert args == ("tags/vip", HttpMethod.GET)
        assert kwargs['params'] == {'tag_name': "vip"}
    
    @pytest.mark.asyncio
    async def test_delete(self, client):
        await TagsService(client).delete("vip")
        args, _ = call_of(client)
        assert args == ("tags/vip", HttpMethod.DELETE)
    
    @pytest.mark.asyncio
    async def test_get_contact_list(self, client):
        await TagsService(client).get_contact_list("vip", start=-1, limit=20)
        
        args, kwargs = call_of(client)
        assert args == ("tags/vip/contacts", HttpMethod.GET)
        assert kwargs['params'] == {'tag_name': "vip", 'limit': 20}
        assert kwargs['response_type'] == List[ContactResponse]
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["get", "delete", "get_contact_list"])
    async def test_blank_tag_name(self, client, method):
        with pytest.raises(ValidationError):
            await getattr(TagsService(client), method)("  ")
        client.execute.assert_not_called()


class TestShortlinksService:
    """Test shortlink endpoints"""
    
    @pytest.mark.asyncio
    async def test_get_list_filters(self, client):
        await ShortlinksService(client).get_list(start_date="2024-01-01", limit=10, offset=0)
        
        args, kwargs = call_of(client)
        assert args == ("short_link/", HttpMethod.GET)
        assert kwargs['params'] == {'start_date': "2024-01-01", 'limit': 10, 'offset': 0}
    
    @pytest.mark.asyncio
    async def test_get_list_by_id_ignores_filters(self, client):
        await ShortlinksService(client).get_list(start_date="2024-01-01", shortlink_id="abc")
        _, kwargs = call_of(client)
        assert kwargs['params'] == {'id': "abc"}
    
    @pytest.mark.asyncio
    async def test_get_list_not_found_is_empty(self, client):
        client.execute.return_value = ApiResponse.error(404, "Not Found", 404, '{"code":404}')
        
        result = await ShortlinksService(client).get_list()
        
        assert result.is_ok
        assert result.data == []
        assert result.response == '{"code":404}'
    
    @pytest.mark.asyncio
    async def test_get_list_other_errors_returned(self, client):
        client.execute.return_value = ApiResponse.error(500, "Internal Server Error", 500)
        result = await ShortlinksService(client).get_list()
        assert result.error_code == 500
    
    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, client):
        client.execute.return_value = ApiResponse.error(404, "Not Found", 404)
        
        result = await ShortlinksService(client).get_by_id("abc")
        
        assert not result.is_ok
        assert result.error_code == 404
        assert result.error_description == "Shortlink not found"
    
    @pytest.mark.asyncio
    async def test_get_by_id_found(self, client):
        link = ShortlinkResponse(id="abc", short_url="https://s.example/abc")
        client.execute.return_value = ApiResponse.success(link)
        
        result = await ShortlinksService(client).get_by_id("abc")
        
        assert result.data is link
        _, kwargs = call_of(client)
        assert kwargs['params'] == {'id': "abc"}
    
    @pytest.mark.asyncio
    async def test_create(self, client):
        await ShortlinksService(client).create("https://example.com/long", name="promo", alias="p1")
        
        args, kwargs = call_of(client)
        assert args == ("short_link", HttpMethod.POST)
        assert kwargs['body'].to_dict() == {
            'long_url': "https://example.com/long",
            'name': "promo",
            'status': "ACTIVE",
            'alias': "p1",
        }
    
    @pytest.mark.asyncio
    async def test_create_requires_url(self, client):
        with pytest.raises(ValidationError):
            await ShortlinksService(client).create("")
    
    @pytest.mark.asyncio
    async def test_update_status(self, client):
        await ShortlinksService(client).update_status("abc", "INACTIVE")
        
        args, kwargs = call_of(client)
        assert args == ("short_link/abc/status", HttpMethod.PUT)
        assert kwargs['params'] == {'id': "abc"}
        assert 'add_params_to_query' not in kwargs
        assert kwargs['body'].status is ShortlinkStatus.INACTIVE


class TestSmsApi:
    """Test the facade end to end over a mocked HTTP layer"""
    
    @staticmethod
    def transport(handler):
        return HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    
    @pytest.mark.asyncio
    async def test_async_services(self, config):
        seen = []
        
        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json={"data": {"tag_name": "vip", "total_contacts": 2}})
        
        async with SmsApi(config, transport=self.transport(handler)) as api:
            result = await api.tags.get("vip")
        
        assert result.data == TagResponse(tag_name="vip", total_contacts=2)
        assert seen == ["https://api.example.com/api/tags/vip?tag_name=vip"]
    
    def test_blocking_services(self, config):
        def handler(request):
            return httpx.Response(200, json={"data": [{"id": "1", "long_url": "https://example.com"}]})
        
        with SmsApi(config, transport=self.transport(handler)).blocking() as api:
            result = api.shortlinks.get_list()
        
        assert result.is_ok
        assert result.data[0].url_id == "1"
    
    def test_retry_option(self, config):
        api = SmsApi(config, transport=self.transport(lambda request: httpx.Response(200)), retry=True)
        assert isinstance(api.client, RetryingApiClient)
        assert api.messages.client is api.client
    
    def test_from_env(self):
        environ = {
            'SMSAPI_API_KEY': "k",
            'SMSAPI_SECRET_KEY': "s",
            'SMSAPI_API_URL': "https://sms.example.com",
        }
        api = SmsApi.from_env(environ, transport=self.transport(lambda request: httpx.Response(200)))
        assert api.config.api_url == "https://sms.example.com/"

"""
Unit tests for payload models and value conversion
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest

from contactosms_sdk.models import (
    MessageDirection,
    MessageResponse,
    MessageStatus,
    ScheduleMessageResponse,
    ShortlinkResponse,
    ShortlinkStatus,
    TagResponse,
    convert_value,
    to_snake_case,
)


class TestModelFromDict:
    """Test building models from decoded JSON"""
    
    def test_message_response_wire_names(self):
        data = {
            "message_id": 10,
            "type": 1,
            "id": "client-1",
            "direction": "MT",
            "status": "SENT",
            "country": "502",
            "is_billable": 1,
            "is_scheduled": "false",
            "created_on": "2024-01-15 10:30:00",
            "groups": ["vip"],
            "recipients": [{"msisdn": "50212345678", "country": "502", "status": "SENT"}],
            "not_a_field": "ignored",
        }
        message = MessageResponse.from_dict(data)
        
        assert message.message_id == 10
        assert message.message_type_id == 1
        assert message.client_message_id == "client-1"
        assert message.direction is MessageDirection.MT
        assert message.status is MessageStatus.SENT
        assert message.country_code == "502"
        assert message.billable is True
        assert message.scheduled is False
        assert message.created_on == datetime(2024, 1, 15, 10, 30, 0)
        assert message.recipients[0].country_code == "502"
    
    def test_missing_keys_keep_defaults(self):
        message = MessageResponse.from_dict({})
        assert message.message_id is None
        assert message.groups == []
    
    def test_nested_models(self):
        schedule = ScheduleMessageResponse.from_dict({
            "id": 3,
            "date_expires": "2024-02-01T00:00:00Z",
            "groups": [{"short_name": "vip"}],
        })
        assert schedule.date_expires == datetime(2024, 2, 1, tzinfo=timezone.utc)
        assert schedule.groups[0].short_name == "vip"
    
    def test_enum_case_insensitive(self):
        assert ShortlinkResponse.from_dict({"status": "active"}).status is ShortlinkStatus.ACTIVE
    
    def test_unknown_enum_value(self):
        with pytest.raises(ValueError):
            MessageResponse.from_dict({"status": "LOST"})
    
    def test_requires_object(self):
        with pytest.raises(TypeError):
            TagResponse.from_dict(["vip"])
    
    def test_shortlink_url_id_fallback(self):
        assert ShortlinkResponse.from_dict({"id": "abc"}).url_id == "abc"
        assert ShortlinkResponse.from_dict({"id": "abc", "url_id": "xyz"}).url_id == "xyz"


class TestModelToDict:
    """Test converting models to wire dictionaries"""
    
    def test_none_omitted_and_wire_names(self):
        message = MessageResponse(message_id=1, client_message_id="c", billable=False)
        assert message.to_dict() == {
            "message_id": 1,
            "id": "c",
            "is_billable": False,
            "groups": [],
            "recipients": [],
        }
    
    def test_enum_and_datetime(self):
        message = MessageResponse(status=MessageStatus.READY, created_on=datetime(2024, 1, 1, 9, 0))
        result = message.to_dict()
        assert result["status"] == "READY"
        assert result["created_on"] == "2024-01-01T09:00:00"


class TestConvertValue:
    """Test annotation-driven conversion"""
    
    def test_optional_and_containers(self):
        assert convert_value(None, Optional[int]) is None
        assert convert_value("5", Optional[int]) == 5
        assert convert_value([1, 2], List[str]) == ["1", "2"]
        assert convert_value({"a": "1"}, Dict[str, int]) == {"a": 1}
    
    def test_shape_errors(self):
        with pytest.raises(TypeError):
            convert_value({"a": 1}, List[int])
        with pytest.raises(TypeError):
            convert_value([1], Dict[str, int])
        with pytest.raises(TypeError):
            convert_value({"a": 1}, str)
    
    def test_integer_conversion(self):
        assert convert_value(3.0, int) == 3
        with pytest.raises(ValueError):
            convert_value(3.5, int)


class TestSnakeCase:
    @pytest.mark.parametrize("name, expected", [
        ("ApiKey", "api_key"),
        ("timeoutSeconds", "timeout_seconds"),
        ("api_url", "api_url"),
        ("HTTPProxy", "http_proxy"),
        ("Message-Query", "message_query"),
    ])
    def test_to_snake_case(self, name, expected):
        assert to_snake_case(name) == expected

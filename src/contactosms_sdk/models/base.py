"""
Base model support for API payloads

This module provides the dataclass base used by every request and response
model, together with the conversion helpers that map JSON values onto typed
Python objects and back.
"""

import re
import dataclasses
from datetime import date, datetime
from enum import Enum
from typing import (
    Any, Dict, List, Mapping, Type, TypeVar, Union, get_args, get_origin, get_type_hints
)

ModelT = TypeVar('ModelT', bound='ApiModel')

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')


def to_snake_case(name: str) -> str:
    """
    Convert a field name to snake_case.
    
    Args:
        name: Field name in camelCase, PascalCase or snake_case
        
    Returns:
        str: snake_case name (already snake_case names are returned unchanged)
    """
    return _CAMEL_BOUNDARY.sub('_', name).replace('-', '_').lower()


def json_field(name: str, **kwargs: Any) -> Any:
    """Declare a dataclass field whose wire name differs from the attribute name."""
    metadata = dict(kwargs.pop('metadata', None) or {})
    metadata['json'] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def _wire_name(f: dataclasses.Field) -> str:
    return f.metadata.get('json') or to_snake_case(f.name)


@dataclasses.dataclass
class ApiModel:
    """
    Base class for API payload models.
    
    Subclasses are plain dataclasses; unknown keys in incoming payloads are
    ignored and ``None`` attributes are left out of outgoing payloads.
    """
    
    @classmethod
    def from_dict(cls: Type[ModelT], data: Mapping[str, Any]) -> ModelT:
        """
        Build a model instance from a decoded JSON object.
        
        Args:
            data: Decoded JSON object
            
        Returns:
            ApiModel: Populated model instance
            
        Raises:
            TypeError: If data is not a JSON object or a value has the wrong shape
            ValueError: If a value cannot be converted to the declared type
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")
        
        hints = get_type_hints(cls)
        kwargs = {}
        for f in dataclasses.fields(cls):
            if not f.init:
                continue
            key = _wire_name(f)
            if key not in data:
                continue
            kwargs[f.name] = convert_value(data[key], hints.get(f.name, Any))
        
        return cls(**kwargs)
    
    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the model to a JSON-ready dictionary.
        
        Returns:
            dict: Wire representation with ``None`` values omitted
        """
        return to_serializable(self)


def to_serializable(value: Any) -> Any:
    """
    Convert models, enums and dates into JSON-ready primitives.
    
    Null values are dropped from objects (models and mappings) at every level.
    
    Args:
        value: Value to convert
        
    Returns:
        JSON-ready value
    """
    if isinstance(value, Enum):
        return value.value
    
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        result = {}
        for f in dataclasses.fields(value):
            item = getattr(value, f.name)
            if item is None:
                continue
            result[_wire_name(f)] = to_serializable(item)
        return result
    
    if isinstance(value, Mapping):
        return {
            str(k): to_serializable(v)
            for k, v in value.items()
            if v is not None
        }
    
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_serializable(v) for v in value]
    
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    
    return value


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected datetime string, got {type(value).__name__}")
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    return datetime.fromisoformat(text)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str) and value.lower() in ('true', 'false', '1', '0'):
        return value.lower() in ('true', '1')
    raise ValueError(f"Cannot interpret {value!r} as boolean")


def convert_value(value: Any, target: Any) -> Any:
    """
    Convert a decoded JSON value to the given type annotation.
    
    Supported targets are ``Any``, primitives, ``Optional[...]``, ``List[...]``,
    ``Dict[...]``, enums, ``datetime``/``date`` and ``ApiModel`` subclasses.
    
    Args:
        value: Decoded JSON value
        target: Type annotation to convert to
        
    Returns:
        Converted value
        
    Raises:
        TypeError: On shape mismatch
        ValueError: On value conversion failure
    """
    if value is None or target is Any or target is None:
        return value
    
    origin = get_origin(target)
    
    if origin is Union:
        args = [a for a in get_args(target) if a is not type(None)]
        if len(args) == 1:
            return convert_value(value, args[0])
        return value
    
    if origin in (list, List):
        if not isinstance(value, list):
            raise TypeError(f"Expected JSON array, got {type(value).__name__}")
        args = get_args(target)
        item_type = args[0] if args else Any
        return [convert_value(v, item_type) for v in value]
    
    if origin in (dict, Dict):
        if not isinstance(value, Mapping):
            raise TypeError(f"Expected JSON object, got {type(value).__name__}")
        args = get_args(target)
        item_type = args[1] if len(args) == 2 else Any
        return {k: convert_value(v, item_type) for k, v in value.items()}
    
    if not isinstance(target, type):
        return value
    
    if issubclass(target, ApiModel):
        return target.from_dict(value)
    
    if issubclass(target, Enum):
        try:
            return target(value)
        except ValueError:
            if isinstance(value, str):
                return target(value.upper())
            raise
    
    if target is datetime:
        return _parse_datetime(value)
    
    if target is date:
        return value if isinstance(value, date) else date.fromisoformat(str(value))
    
    if target is bool:
        return _parse_bool(value)
    
    if target is int:
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"Cannot interpret {value!r} as integer")
        return int(value)
    
    if target is float:
        return float(value)
    
    if target is str:
        if isinstance(value, (dict, list)):
            raise TypeError(f"Expected JSON string, got {type(value).__name__}")
        return str(value)
    
    if target in (dict, list):
        if not isinstance(value, target):
            raise TypeError(f"Expected {target.__name__}, got {type(value).__name__}")
        return value
    
    return value

"""
Configuration management for ContactoSMS Python SDK

This module provides the validated client configuration and its loaders.
"""

from .sms_api_config import (
    SECTION_NAME,
    ENV_PREFIX,
    SmsApiConfig,
    ProxyConfig,
    validate_config,
    load_config_from_file,
    load_config_from_env,
)

__all__ = [
    'SECTION_NAME',
    'ENV_PREFIX',
    'SmsApiConfig',
    'ProxyConfig',
    'validate_config',
    'load_config_from_file',
    'load_config_from_env',
]

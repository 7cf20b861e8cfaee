#!/usr/bin/env python3
"""Modular configuration system for the session count authenticator

Configuration hierarchy:
- session_store_config: Session-store endpoint, service credentials, login pages
- logging_config: Logging configuration
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .session_store_config import SessionStoreConfig

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}
env_file = env_files.get(env, "deployment/environments/dev.env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = SessionStoreConfig.from_env()

def get_settings() -> SessionStoreConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> SessionStoreConfig:
    """Reload settings from environment"""
    global settings
    settings = SessionStoreConfig.from_env()
    return settings

__all__ = [
    'SessionStoreConfig',
    'LoggingConfig',
    'get_settings',
    'reload_settings',
    'settings',
]

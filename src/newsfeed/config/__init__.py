"""Configuration module for the newsfeed application.

This module provides centralized configuration management for the entire
application, including database connections, logging setup, error codes and
application settings.

Key Components:
- settings: Application configuration loaded from environment variables and TOML files
- Database: SQLAlchemy async engine and session management
- Logging: Loguru-based logging configuration with development/production modes
- Error handling: Centralized error codes and messages
- Database seeding: Sample posts for development and demos
"""

from newsfeed.config.config import settings
from newsfeed.config.db import engine, get_session
from newsfeed.config.errors import ErrorCode, ErrorNames
from newsfeed.config.logger import config_logger

__all__ = [
    "ErrorCode",
    "ErrorNames",
    "config_logger",
    "engine",
    "get_session",
    "settings",
]

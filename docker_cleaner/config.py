"""Centralized configuration for Docker Cleaner."""
from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DOCKER_SOCKET_PATH = '/var/run/docker.sock'


class Config:
    """Base configuration loaded from environment variables."""
    DOCKER_SOCKET_PATH = os.getenv('DOCKER_SOCKET_PATH') or DEFAULT_DOCKER_SOCKET_PATH
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    PORT = int(os.getenv('PORT', '3001'))
    RATE_LIMIT_PER_MINUTE = int(os.getenv('RATE_LIMIT_PER_MINUTE', '120'))
    FORCE_HTTPS = os.getenv('FORCE_HTTPS', 'false').lower() == 'true'
    API_BASE = os.getenv('API_BASE', '/api')


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    RATELIMIT_ENABLED = False

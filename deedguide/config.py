"""
Configuration Module for DeedGuide

This module defines configuration classes for different environments:
- DevelopmentConfig: Local development
- ProductionConfig: Production deployment
- TestingConfig: Automated testing configuration
"""

import os


class Config:
    """Base configuration with common settings"""

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Narratives are Vietnamese; keep them readable in JSON responses.
    JSON_ENSURE_ASCII = False

    # Printed guidance sheet
    GUIDANCE_OFFICE_NAME = os.environ.get('GUIDANCE_OFFICE_NAME', 'PHÒNG CÔNG CHỨNG SỐ 5')
    GUIDANCE_SHEET_VERSION = os.environ.get('GUIDANCE_SHEET_VERSION', '3.9')

    # Fact sheets are small; reject anything unreasonable.
    MAX_CONTENT_LENGTH = 256 * 1024


class DevelopmentConfig(Config):
    """Development environment configuration"""

    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production environment configuration"""

    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing environment configuration"""

    TESTING = True
    DEBUG = True


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

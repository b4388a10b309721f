#!/usr/bin/env python3
"""Modular configuration system for the Medusa BFF

Configuration hierarchy:
- bff_config: HTTP surface settings (port, prefix, CORS) combining all sub-configs
- service_config: Medusa backend endpoint and credentials
- infra_config: Database / cache connection strings
- logging_config: Logging configuration
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .infra_config import InfraConfig
from .service_config import MedusaConfig
from .bff_config import BffConfig

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
settings = BffConfig.from_env()

def get_settings() -> BffConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> BffConfig:
    """Reload settings from environment"""
    global settings
    settings = BffConfig.from_env()
    return settings

__all__ = [
    'BffConfig',
    'get_settings',
    'reload_settings',
    'settings',
    'LoggingConfig',
    'InfraConfig',
    'MedusaConfig',
]

#!/usr/bin/env python3
"""BFF main configuration

Combines all sub-configs with the HTTP surface settings of the BFF.
"""
import os
from dataclasses import dataclass, field
from typing import List

from .infra_config import InfraConfig
from .logging_config import LoggingConfig
from .service_config import MedusaConfig


def _bool(val: str) -> bool:
    return val.lower() == "true"

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default

def _list(val: str) -> List[str]:
    return [item.strip() for item in val.split(",") if item.strip()]


@dataclass
class BffConfig:
    """Main BFF configuration"""

    environment: str = "development"
    debug: bool = False

    # HTTP surface
    host: str = "0.0.0.0"
    port: int = 3001
    api_prefix: str = "api"
    api_version: str = "v1"
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])

    # Sub-configs
    medusa: MedusaConfig = field(default_factory=MedusaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    infra: InfraConfig = field(default_factory=InfraConfig)

    @property
    def base_path(self) -> str:
        """Mount point of every versioned route, e.g. /api/v1"""
        prefix = self.api_prefix.strip("/")
        version = self.api_version.strip("/")
        parts = [part for part in (prefix, version) if part]
        return "/" + "/".join(parts) if parts else ""

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls) -> 'BffConfig':
        """Load BFF configuration from environment variables"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            environment=env,
            debug=_bool(os.getenv("DEBUG", "false")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=_int(os.getenv("PORT", "3001"), 3001),
            api_prefix=os.getenv("API_PREFIX", "api"),
            api_version=os.getenv("API_VERSION", "v1"),
            cors_origins=_list(os.getenv("CORS_ORIGINS", "http://localhost:3000")),
            medusa=MedusaConfig.from_env(),
            logging=LoggingConfig.from_env(),
            infra=InfraConfig.from_env(),
        )

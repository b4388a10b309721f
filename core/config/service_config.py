#!/usr/bin/env python3
"""Medusa backend configuration

Endpoint and credentials of the Medusa commerce backend that every
translator and operator script talks to.
"""
import os
from dataclasses import dataclass
from typing import Optional


def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class MedusaConfig:
    """Medusa backend endpoint"""

    backend_url: str = "http://localhost:9000"
    publishable_key: str = ""
    timeout: float = 30.0

    # Admin credentials, consumed only by the operator scripts
    admin_token: Optional[str] = None
    admin_email: Optional[str] = None
    admin_password: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'MedusaConfig':
        """Load Medusa configuration from environment variables"""
        return cls(
            backend_url=os.getenv("MEDUSA_BACKEND_URL", "http://localhost:9000"),
            publishable_key=os.getenv("MEDUSA_PUBLISHABLE_KEY", ""),
            timeout=_float(os.getenv("MEDUSA_TIMEOUT", "30"), 30.0),
            admin_token=os.getenv("MEDUSA_ADMIN_TOKEN") or None,
            admin_email=os.getenv("MEDUSA_ADMIN_EMAIL") or None,
            admin_password=os.getenv("MEDUSA_ADMIN_PASSWORD") or None,
        )

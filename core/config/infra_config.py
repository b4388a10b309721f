#!/usr/bin/env python3
"""Infrastructure configuration

Connection strings recognised for deployment parity with the Medusa backend.
The BFF itself is stateless and never opens these connections.
"""
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class InfraConfig:
    """Infrastructure service endpoints"""
    database_url: Optional[str] = None
    redis_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'InfraConfig':
        return cls(
            database_url=os.getenv("DATABASE_URL") or None,
            redis_url=os.getenv("REDIS_URL") or None,
        )

"""
Component Test Mocks

Shared mock implementations for component testing.
These mocks replace the outbound I/O of the BFF (the HTTP client and the
Medusa gateway).
"""

from .http_mock import MockHttpClient, MockHttpResponse
from .medusa_mock import MockMedusaGateway
from .medusa_admin_fake import FakeMedusaAdmin

__all__ = [
    'MockHttpClient',
    'MockHttpResponse',
    'MockMedusaGateway',
    'FakeMedusaAdmin',
]

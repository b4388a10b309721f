"""
Customer Authentication Service

Registers and logs in storefront customers through Medusa's emailpass auth
provider. Tokens are issued by Medusa and forwarded verbatim; nothing is
stored here.
"""

import logging
from typing import Optional, Dict, Any

from core.auth_dependencies import auth_headers, require_authorization
from core.errors import UnauthorizedError
from core.medusa_client import MedusaGatewayProtocol
from core.payload import compact

from .models import RegisterCustomerRequest, LoginCustomerRequest

logger = logging.getLogger(__name__)


class AuthService:
    """Customer auth translator"""

    def __init__(self, medusa: MedusaGatewayProtocol):
        self.medusa = medusa

    async def register(self, request: RegisterCustomerRequest) -> Dict[str, Any]:
        """
        Register a customer.

        Medusa first issues a registration token for the email/password
        identity, then the customer record is created with that token.
        """
        identity = await self.medusa.auth_request(
            "/customer/emailpass/register",
            method="POST",
            body={"email": request.email, "password": request.password},
        )
        token = identity.get("token")
        if not token:
            raise UnauthorizedError("Registration was not accepted")

        response = await self.medusa.store_request(
            "/customers",
            method="POST",
            body=compact({
                "email": request.email,
                "first_name": request.firstName,
                "last_name": request.lastName,
                "phone": request.phone,
            }),
            headers={"Authorization": f"Bearer {token}"},
        )
        customer = response["customer"]
        logger.info(f"Registered customer {customer.get('id')}")
        return {
            "customer": self.transform_customer(customer),
            "token": token,
            "message": "Registration successful",
        }

    async def login(self, request: LoginCustomerRequest) -> Dict[str, Any]:
        response = await self.medusa.auth_request(
            "/customer/emailpass",
            method="POST",
            body={"email": request.email, "password": request.password},
        )
        token = response.get("token")
        if not token:
            raise UnauthorizedError("Invalid email or password")
        return {"token": token, "message": "Login successful"}

    async def get_profile(self, authorization: Optional[str]) -> Dict[str, Any]:
        require_authorization(authorization)
        response = await self.medusa.store_request(
            "/customers/me", headers=auth_headers(authorization)
        )
        return {"customer": self.transform_customer(response["customer"])}

    async def logout(self, authorization: Optional[str]) -> Dict[str, Any]:
        require_authorization(authorization)
        await self.medusa.auth_request(
            "/session", method="DELETE", headers=auth_headers(authorization)
        )
        return {"message": "Logout successful"}

    @staticmethod
    def transform_customer(customer: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": customer.get("id"),
            "email": customer.get("email"),
            "firstName": customer.get("first_name"),
            "lastName": customer.get("last_name"),
            "phone": customer.get("phone"),
            "hasAccount": customer.get("has_account", False),
            "createdAt": customer.get("created_at"),
            "updatedAt": customer.get("updated_at"),
        }

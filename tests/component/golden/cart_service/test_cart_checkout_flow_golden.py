"""
Cart and Checkout Component Golden Tests

CartService and CheckoutService against a recording Medusa gateway.
"""
import pytest

from core.errors import MedusaApiError, NotFoundError
from microservices.cart_service.cart_service import CartService
from microservices.cart_service.models import AddLineItemRequest, CreateCartRequest, UpdateLineItemRequest
from microservices.checkout_service.checkout_service import CheckoutService
from microservices.checkout_service.models import (
    CompleteCheckoutRequest,
    SelectShippingOptionRequest,
    ShippingAddressRequest,
)

pytestmark = [pytest.mark.component, pytest.mark.golden, pytest.mark.asyncio]


@pytest.fixture
def carts(mock_medusa):
    return CartService(mock_medusa)


@pytest.fixture
def checkout(mock_medusa):
    return CheckoutService(mock_medusa)


class TestCartServiceGolden:
    """Golden: cart operations"""

    async def test_create_cart_body(self, carts, mock_medusa, medusa_cart):
        mock_medusa.set_response("store", "POST", "/carts", {"cart": medusa_cart})

        result = await carts.create_cart(CreateCartRequest(regionId="reg_01", countryCode="PK"))

        call = mock_medusa.assert_called("store", "POST", "/carts")
        assert call["body"] == {"region_id": "reg_01", "country_code": "pk"}
        assert result["cart"]["id"] == "cart_01"

    async def test_add_and_update_line_items(self, carts, mock_medusa, medusa_cart):
        mock_medusa.set_response("store", "POST", "/carts/cart_01/line-items*", {"cart": medusa_cart})

        await carts.add_line_item("cart_01", AddLineItemRequest(variantId="variant_01", quantity=2))
        await carts.update_line_item("cart_01", "item_01", UpdateLineItemRequest(quantity=3))

        assert mock_medusa.calls[0]["body"] == {"variant_id": "variant_01", "quantity": 2}
        assert mock_medusa.calls[1]["path"] == "/carts/cart_01/line-items/item_01"
        assert mock_medusa.calls[1]["body"] == {"quantity": 3}

    async def test_remove_line_item_reads_parent(self, carts, mock_medusa, medusa_cart):
        """GOLDEN: deletion answers with the owning cart as 'parent'"""
        mock_medusa.set_response(
            "store", "DELETE", "/carts/cart_01/line-items/item_01",
            {"id": "item_01", "deleted": True, "parent": medusa_cart},
        )

        result = await carts.remove_line_item("cart_01", "item_01")

        assert result["cart"]["id"] == "cart_01"

    async def test_missing_cart(self, carts, mock_medusa):
        mock_medusa.set_error("store", "GET", "/carts/cart_x", MedusaApiError("x", status_code=404))

        with pytest.raises(NotFoundError) as exc_info:
            await carts.get_cart("cart_x")

        assert exc_info.value.message == "Cart with ID cart_x not found"


class TestCheckoutServiceGolden:
    """Golden: shipping, payment and completion"""

    async def test_shipping_options(self, checkout, mock_medusa):
        mock_medusa.set_response("store", "GET", "/shipping-options", {
            "shipping_options": [{"id": "so_1", "name": "Standard Shipping", "amount": 25000}],
        })

        result = await checkout.get_shipping_options("cart_01")

        assert mock_medusa.last_call["query"] == {"cart_id": "cart_01"}
        assert result == {"shippingOptions": [
            {"id": "so_1", "name": "Standard Shipping", "amount": 25000, "priceInclTax": False},
        ]}

    async def test_shipping_address_translated(self, checkout, mock_medusa, medusa_cart):
        mock_medusa.set_response("store", "POST", "/carts/cart_01", {"cart": medusa_cart})
        request = ShippingAddressRequest(
            firstName="Ali", lastName="Khan", address1="House 12, F-7/2", city="Islamabad",
            postalCode="44000", countryCode="PK", phone="+92-300-1234567", email="ali@example.com",
        )

        await checkout.update_shipping_address("cart_01", request)

        body = mock_medusa.last_call["body"]
        assert body["email"] == "ali@example.com"
        assert body["shipping_address"] == {
            "first_name": "Ali",
            "last_name": "Khan",
            "address_1": "House 12, F-7/2",
            "city": "Islamabad",
            "postal_code": "44000",
            "country_code": "pk",
            "phone": "+92-300-1234567",
        }

    async def test_select_shipping_option(self, checkout, mock_medusa, medusa_cart):
        mock_medusa.set_response("store", "POST", "/carts/cart_01/shipping-methods", {"cart": medusa_cart})

        await checkout.select_shipping_option("cart_01", SelectShippingOptionRequest(optionId="so_1"))

        assert mock_medusa.last_call["body"] == {"option_id": "so_1"}

    async def test_payment_sessions_create_collection_when_missing(self, checkout, mock_medusa, medusa_cart):
        """GOLDEN: no payment collection -> create one, then open a session"""
        mock_medusa.set_response("store", "GET", "/carts/cart_01", {"cart": medusa_cart})
        mock_medusa.set_response("store", "POST", "/payment-collections", {"payment_collection": {"id": "paycol_1"}})
        mock_medusa.set_response("store", "POST", "/payment-collections/paycol_1/payment-sessions", {
            "payment_collection": {"id": "paycol_1", "payment_sessions": [
                {"id": "payses_1", "provider_id": "pp_system_default", "status": "pending"},
            ]},
        })

        result = await checkout.initialize_payment_sessions("cart_01")

        create = mock_medusa.assert_called("store", "POST", "/payment-collections")
        assert create["body"] == {"cart_id": "cart_01"}
        session = mock_medusa.assert_called("store", "POST", "/payment-collections/paycol_1/payment-sessions")
        assert session["body"] == {"provider_id": "pp_system_default"}
        assert result["paymentSessions"] == [
            {"id": "payses_1", "providerId": "pp_system_default", "status": "pending"},
        ]
        assert result["cart"]["id"] == "cart_01"

    async def test_payment_sessions_reuse_collection(self, checkout, mock_medusa, medusa_cart):
        mock_medusa.set_response("store", "GET", "/carts/cart_01", {
            "cart": dict(medusa_cart, payment_collection={"id": "paycol_9"}),
        })

        await checkout.initialize_payment_sessions("cart_01", "pp_stripe_stripe")

        assert not mock_medusa.calls_to("store", "POST", "/payment-collections")
        session = mock_medusa.assert_called("store", "POST", "/payment-collections/paycol_9/payment-sessions")
        assert session["body"] == {"provider_id": "pp_stripe_stripe"}

    async def test_complete_returns_order(self, checkout, mock_medusa):
        mock_medusa.set_response("store", "POST", "/carts/cart_01/complete", {
            "type": "order",
            "order": {"id": "order_1", "display_id": 7, "status": "pending", "total": 100},
        })

        result = await checkout.complete_checkout("cart_01")

        assert result["type"] == "order"
        assert result["order"]["displayId"] == 7

    async def test_complete_refused_returns_cart_and_error(self, checkout, mock_medusa, medusa_cart):
        """GOLDEN: platform refusal is a result, not an exception"""
        mock_medusa.set_response("store", "POST", "/carts/cart_01/complete", {
            "type": "cart",
            "cart": medusa_cart,
            "error": {"message": "Payment authorization failed"},
        })

        result = await checkout.complete_checkout("cart_01", CompleteCheckoutRequest())

        assert result["type"] == "cart"
        assert result["error"] == "Payment authorization failed"
        assert result["cart"]["id"] == "cart_01"

from unittest.mock import AsyncMock
from unittest.mock import MagicMock
from unittest.mock import patch

import pytest
import stripe

from checkoutsessions.domain.checkout.entities import CheckoutMode
from checkoutsessions.domain.checkout.entities import Recurrence
from checkoutsessions.domain.checkout.entities import SessionRequest
from checkoutsessions.repository.checkout_api_repository import CheckoutApiRepository

SESSION_URL = "https://checkout.stripe.com/c/pay/cs_test_123"


@pytest.fixture
def create_async():
    session = MagicMock()
    session.url = SESSION_URL
    with patch.object(
        stripe.checkout.Session, "create_async", new_callable=AsyncMock
    ) as mock_create:
        mock_create.return_value = session
        yield mock_create


@pytest.fixture
def repository():
    return CheckoutApiRepository(
        "sk_test_123",
        "2020-08-27",
        "https://www.success.com",
        "https://www.cancelled.com",
    )


def test_configures_stripe(repository):
    assert stripe.api_key == "sk_test_123"
    assert stripe.api_version == "2020-08-27"


async def test_payment_session(repository, create_async):
    result = await repository.create_checkout_session(
        SessionRequest(
            mode=CheckoutMode.PAYMENT,
            amount=10,
            unit_amount=1000,
            product_name="Flutter Payment",
        )
    )

    assert result == SESSION_URL
    create_async.assert_awaited_once_with(
        mode="payment",
        line_items=[
            {
                "price_data": {
                    "currency": "USD",
                    "product_data": {"name": "Flutter Payment"},
                    "unit_amount": 1000,
                },
                "quantity": 1,
            }
        ],
        payment_method_types=["card"],
        success_url="https://www.success.com",
        cancel_url="https://www.cancelled.com",
        billing_address_collection="required",
    )


async def test_subscription_session(repository, create_async):
    result = await repository.create_checkout_session(
        SessionRequest(
            mode=CheckoutMode.SUBSCRIPTION,
            amount=5,
            unit_amount=500,
            product_name="Flutter Subscription",
            recurrence=Recurrence(),
        )
    )

    assert result == SESSION_URL
    kwargs = create_async.call_args.kwargs
    assert kwargs["mode"] == "subscription"
    assert kwargs["line_items"][0]["price_data"] == {
        "currency": "USD",
        "product_data": {"name": "Flutter Subscription"},
        "recurring": {"interval": "month", "interval_count": 1},
        "unit_amount": 500,
    }
    assert kwargs["payment_method_types"] == ["card"]
    assert kwargs["success_url"] == "https://www.success.com"
    assert kwargs["cancel_url"] == "https://www.cancelled.com"
    assert kwargs["billing_address_collection"] == "required"


async def test_provider_error_propagates(repository, create_async):
    create_async.side_effect = stripe.AuthenticationError("Invalid API Key")

    with pytest.raises(stripe.AuthenticationError):
        await repository.create_checkout_session(
            SessionRequest(
                mode=CheckoutMode.PAYMENT,
                amount=10,
                unit_amount=1000,
                product_name="Flutter Payment",
            )
        )

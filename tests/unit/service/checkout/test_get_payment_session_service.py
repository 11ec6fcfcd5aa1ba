from unittest.mock import AsyncMock

import stripe

from checkoutsessions.domain.checkout.entities import CheckoutMode
from checkoutsessions.repository.checkout_api_repository import CheckoutApiRepository
from checkoutsessions.service.checkout import get_payment_session_service as service
from checkoutsessions.service.checkout.entities import CheckoutSessionData
from checkoutsessions.service.checkout.entities import CheckoutSessionRequest
from checkoutsessions.service.checkout.entities import CheckoutSessionResponse

SESSION_URL = "https://checkout.stripe.com/c/pay/cs_test_123"


def _request(amount: float) -> CheckoutSessionRequest:
    return CheckoutSessionRequest(data=CheckoutSessionData(amount=amount))


async def test_success():
    repository = AsyncMock(spec=CheckoutApiRepository)
    repository.create_checkout_session.return_value = SESSION_URL

    response = await service.execute(_request(10), repository)

    assert response == CheckoutSessionResponse(result=SESSION_URL)
    session_request = repository.create_checkout_session.call_args.args[0]
    assert session_request.mode == CheckoutMode.PAYMENT
    assert session_request.unit_amount == 1000
    assert session_request.currency == "USD"
    assert session_request.product_name == "Flutter Payment"
    assert session_request.recurrence is None


async def test_provider_error_returns_null():
    repository = AsyncMock(spec=CheckoutApiRepository)
    repository.create_checkout_session.side_effect = stripe.APIConnectionError(
        "Network error"
    )

    response = await service.execute(_request(10), repository)

    assert response == CheckoutSessionResponse(result=None)


async def test_unexpected_error_returns_null():
    repository = AsyncMock(spec=CheckoutApiRepository)
    repository.create_checkout_session.side_effect = RuntimeError("boom")

    response = await service.execute(_request(10), repository)

    assert response.result is None


async def test_invalid_amount_returns_null():
    repository = AsyncMock(spec=CheckoutApiRepository)

    response = await service.execute(_request(-10), repository)

    assert response == CheckoutSessionResponse(result=None)
    repository.create_checkout_session.assert_not_called()

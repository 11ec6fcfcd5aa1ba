from checkoutsessions.domain.checkout.entities import CheckoutMode
from checkoutsessions.repository.checkout_api_repository import CheckoutApiRepository
from checkoutsessions.service.checkout import checkout_session_service
from checkoutsessions.service.checkout.entities import CheckoutSessionRequest
from checkoutsessions.service.checkout.entities import CheckoutSessionResponse


async def execute(
    request: CheckoutSessionRequest,
    checkout_api_repository: CheckoutApiRepository,
) -> CheckoutSessionResponse:
    return await checkout_session_service.execute(
        CheckoutMode.PAYMENT, request, checkout_api_repository
    )

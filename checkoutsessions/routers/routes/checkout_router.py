from fastapi import APIRouter
from fastapi import Depends

from checkoutsessions import dependencies
from checkoutsessions.repository.checkout_api_repository import CheckoutApiRepository
from checkoutsessions.service.checkout import get_payment_session_service
from checkoutsessions.service.checkout import get_subscription_session_service
from checkoutsessions.service.checkout.entities import CheckoutSessionRequest
from checkoutsessions.service.checkout.entities import CheckoutSessionResponse

TAG = "Checkout"
router = APIRouter()
router.tags = [TAG]


@router.post(
    "/getPaymentSession",
    summary="Create a one-time payment checkout session",
    description="Creates a hosted checkout session charging `amount` US dollars once.",
    response_description="Checkout page url, or null if the session could not be created.",
    response_model=CheckoutSessionResponse,
)
async def get_payment_session(
    request: CheckoutSessionRequest,
    checkout_api_repository: CheckoutApiRepository = Depends(
        dependencies.get_checkout_api_repository
    ),
):
    return await get_payment_session_service.execute(request, checkout_api_repository)


@router.post(
    "/getSubscriptionSession",
    summary="Create a monthly subscription checkout session",
    description="Creates a hosted checkout session charging `amount` US dollars every month.",
    response_description="Checkout page url, or null if the session could not be created.",
    response_model=CheckoutSessionResponse,
)
async def get_subscription_session(
    request: CheckoutSessionRequest,
    checkout_api_repository: CheckoutApiRepository = Depends(
        dependencies.get_checkout_api_repository
    ),
):
    return await get_subscription_session_service.execute(
        request, checkout_api_repository
    )

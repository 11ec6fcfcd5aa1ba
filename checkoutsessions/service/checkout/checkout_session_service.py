from prometheus_client import Counter

from checkoutsessions import api_logger
from checkoutsessions.domain.checkout import create_checkout_session_use_case
from checkoutsessions.domain.checkout.entities import CheckoutMode
from checkoutsessions.repository.checkout_api_repository import CheckoutApiRepository
from checkoutsessions.service.checkout.entities import CheckoutSessionRequest
from checkoutsessions.service.checkout.entities import CheckoutSessionResponse

logger = api_logger.get()

checkout_sessions_counter = Counter(
    "checkout_sessions",
    "Checkout session creation attempts by mode and status",
    ["mode", "status"],
)


async def execute(
    mode: CheckoutMode,
    request: CheckoutSessionRequest,
    checkout_api_repository: CheckoutApiRepository,
) -> CheckoutSessionResponse:
    # Any failure is reported to the caller as a null result
    try:
        url = await create_checkout_session_use_case.execute(
            mode, request.data.amount, checkout_api_repository
        )
    except Exception as e:
        logger.error(
            f"Failed to create checkout session, mode={mode.value} "
            f"amount={request.data.amount} error: {e}",
            exc_info=True,
        )
        checkout_sessions_counter.labels(mode.value, "failed").inc()
        return CheckoutSessionResponse(result=None)
    checkout_sessions_counter.labels(mode.value, "created").inc()
    return CheckoutSessionResponse(result=url)

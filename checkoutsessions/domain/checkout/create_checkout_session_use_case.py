from typing import Optional

from checkoutsessions.domain.checkout import create_session_request_use_case
from checkoutsessions.domain.checkout.entities import CheckoutMode
from checkoutsessions.repository.checkout_api_repository import CheckoutApiRepository


async def execute(
    mode: CheckoutMode,
    amount: float,
    checkout_api_repository: CheckoutApiRepository,
) -> Optional[str]:
    session_request = create_session_request_use_case.execute(mode, amount)
    return await checkout_api_repository.create_checkout_session(session_request)

from typing import Dict
from typing import Optional

import stripe

from checkoutsessions.domain.checkout.entities import SessionRequest


class CheckoutApiRepository:

    def __init__(
        self,
        api_key: Optional[str],
        api_version: str,
        success_url: str,
        cancel_url: str,
    ):
        if api_key:
            stripe.api_key = api_key
        stripe.api_version = api_version
        self.success_url = success_url
        self.cancel_url = cancel_url

    async def create_checkout_session(
        self, session_request: SessionRequest
    ) -> Optional[str]:
        # Stripe owns the session from here on, the caller only gets the hosted page url
        session = await stripe.checkout.Session.create_async(
            mode=session_request.mode.value,
            line_items=[
                {
                    "price_data": _get_price_data(session_request),
                    "quantity": 1,
                }
            ],
            payment_method_types=["card"],
            success_url=self.success_url,
            cancel_url=self.cancel_url,
            billing_address_collection="required",
        )
        return session.url


def _get_price_data(session_request: SessionRequest) -> Dict:
    price_data = {
        "currency": session_request.currency,
        "product_data": {
            "name": session_request.product_name,
        },
        "unit_amount": session_request.unit_amount,
    }
    if session_request.recurrence:
        price_data["recurring"] = {
            "interval": session_request.recurrence.interval,
            "interval_count": session_request.recurrence.interval_count,
        }
    return price_data

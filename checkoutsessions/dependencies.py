import settings
from checkoutsessions.repository.checkout_api_repository import CheckoutApiRepository

_checkout_api_repository: CheckoutApiRepository


# pylint: disable=W0603
def init_globals():
    global _checkout_api_repository

    _checkout_api_repository = CheckoutApiRepository(
        settings.STRIPE_API_KEY,
        settings.STRIPE_API_VERSION,
        settings.CHECKOUT_SUCCESS_URL,
        settings.CHECKOUT_CANCEL_URL,
    )


def get_checkout_api_repository() -> CheckoutApiRepository:
    return _checkout_api_repository

from dataclasses import dataclass
from enum import Enum
from typing import Literal
from typing import Optional

PAYMENT_PRODUCT_NAME = "Flutter Payment"
SUBSCRIPTION_PRODUCT_NAME = "Flutter Subscription"


class CheckoutMode(Enum):
    PAYMENT = "payment"
    SUBSCRIPTION = "subscription"

    def product_name(self) -> str:
        if self == CheckoutMode.SUBSCRIPTION:
            return SUBSCRIPTION_PRODUCT_NAME
        return PAYMENT_PRODUCT_NAME


class InvalidAmountError(Exception):
    def __init__(self, amount):
        super().__init__(f"Amount can not be charged in minor units: {amount!r}")
        self.amount = amount


@dataclass(frozen=True)
class Recurrence:
    interval: Literal["month"] = "month"
    interval_count: int = 1


@dataclass(frozen=True)
class SessionRequest:
    mode: CheckoutMode
    # major currency units, as received from the caller
    amount: float
    # minor currency units, amount * 100
    unit_amount: int
    product_name: str
    currency: Literal["USD"] = "USD"
    recurrence: Optional[Recurrence] = None

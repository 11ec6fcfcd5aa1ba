import math
from decimal import Decimal
from decimal import InvalidOperation

from checkoutsessions.domain.checkout.entities import CheckoutMode
from checkoutsessions.domain.checkout.entities import InvalidAmountError
from checkoutsessions.domain.checkout.entities import Recurrence
from checkoutsessions.domain.checkout.entities import SessionRequest

MINOR_UNITS_PER_MAJOR_UNIT = 100


def execute(mode: CheckoutMode, amount: float) -> SessionRequest:
    recurrence = None
    if mode == CheckoutMode.SUBSCRIPTION:
        recurrence = Recurrence(interval="month", interval_count=1)
    return SessionRequest(
        mode=mode,
        amount=amount,
        unit_amount=to_minor_units(amount),
        product_name=mode.product_name(),
        recurrence=recurrence,
    )


def to_minor_units(amount: float) -> int:
    """
    Converts a major-unit amount (dollars) into minor units (cents).
    Goes through the decimal string representation so 10.1 becomes 1010
    and not 1009.9999999999999.
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InvalidAmountError(amount)
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidAmountError(amount)
    try:
        minor_units = Decimal(str(amount)) * MINOR_UNITS_PER_MAJOR_UNIT
    except InvalidOperation as e:
        raise InvalidAmountError(amount) from e
    if minor_units != minor_units.to_integral_value():
        raise InvalidAmountError(amount)
    return int(minor_units)

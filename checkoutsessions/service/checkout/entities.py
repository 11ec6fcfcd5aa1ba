from typing import Optional

from pydantic import BaseModel
from pydantic import Field


class CheckoutSessionData(BaseModel):
    amount: float = Field(description="Amount to charge in US dollars")


class CheckoutSessionRequest(BaseModel):
    data: CheckoutSessionData = Field(description="Callable function payload")

    class Config:
        json_schema_extra = {
            "example": {
                "data": {"amount": 10},
            }
        }


class CheckoutSessionResponse(BaseModel):
    result: Optional[str] = Field(
        description="Hosted checkout page url, null if the session could not be created"
    )

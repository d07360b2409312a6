"""Request bodies of the Stripe collaborator endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountStatusRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    account_id: Optional[str] = Field(default=None, alias="accountId")


class PaymentSessionRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    session_id: Optional[str] = None

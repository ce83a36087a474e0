"""
Account resource and JSON envelope models (Pydantic v2).

Every field is optional. ``None`` means the field is absent from the wire body,
which is not the same thing as an empty string, ``False`` or an empty list.
Models are strict: ``"3"`` is not a version and ``"true"`` is not a boolean.
"""
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class AccountAttributes(BaseModel):
    """Descriptive attributes of an account."""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    account_classification: Optional[str] = None
    account_matching_opt_out: Optional[bool] = None
    alternative_names: Optional[List[str]] = None
    bank_id: Optional[str] = None
    bank_id_code: Optional[str] = None
    bic: Optional[str] = None
    country: Optional[str] = None
    base_currency: Optional[str] = None
    iban: Optional[str] = None
    account_number: Optional[str] = None
    customer_id: Optional[str] = None
    joint_account: Optional[bool] = None
    status: Optional[str] = None
    switched: Optional[bool] = None
    secondary_identification: Optional[str] = None
    name: Optional[List[str]] = None


class AccountData(BaseModel):
    """An organisation account as exchanged with the accounts service."""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    id: Optional[str] = None
    organisation_id: Optional[str] = None
    type: Optional[str] = None
    version: Optional[int] = Field(
        default=None,
        description="Assigned by the service on create, required for delete.",
    )
    attributes: Optional[AccountAttributes] = None

    def is_empty(self) -> bool:
        """True when every account field is absent."""
        return all(getattr(self, name) is None for name in type(self).model_fields)


class Envelope(BaseModel, Generic[T]):
    """Wire wrapper ``{"data": ...}`` for request and response bodies."""

    model_config = ConfigDict(extra="ignore", strict=True)

    data: Optional[T] = None

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

MessageStatus = Literal["pending", "sent"]


class PolicyMessage(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    content: str
    sent_at: datetime
    status: MessageStatus


class PolicyMessageCreate(BaseModel):
    content: str = Field(..., min_length=1)
    sent_at: datetime | None = None  # Defaults to the time the policy is added
    status: MessageStatus | None = None  # Defaults to "pending"


class Policy(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    phone_number: str
    insurance_type: str
    insurance_company: str
    policy_number: str
    policy_start_date: datetime
    policy_end_date: datetime
    premium_amount: float
    messages: list[PolicyMessage] = []


class PolicyCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone_number: str = Field(..., min_length=1, max_length=50)
    insurance_type: str = Field(..., min_length=1, max_length=100)
    insurance_company: str = Field(..., min_length=1, max_length=255)
    policy_number: str = Field(..., min_length=1, max_length=100)
    policy_start_date: datetime
    policy_end_date: datetime
    premium_amount: float = Field(..., ge=0, description="Premium amount (must be >= 0)")
    messages: list[PolicyMessageCreate] | None = None


class PolicyRenew(BaseModel):
    """
    Partial overwrite of a policy's fields.

    Only keys present in the request are applied. Values are type-checked but
    not validated against business rules: the policy number is not re-checked
    for uniqueness and the end date may precede the start date.
    """

    name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    insurance_type: str | None = None
    insurance_company: str | None = None
    policy_number: str | None = None
    policy_start_date: datetime | None = None
    policy_end_date: datetime | None = None
    premium_amount: float | None = None

    @field_validator("*")
    @classmethod
    def reject_null(cls, v):
        # Every policy column is required, so an explicit null cannot be stored
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class PolicyRenewed(BaseModel):
    message: str
    policy: Policy


class PolicyDeleted(BaseModel):
    message: str
    deleted_count: int


class PolicySms(BaseModel):
    phone_number: str
    message: str

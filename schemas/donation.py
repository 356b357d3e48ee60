import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.base import MessageOutputBase


def _format_amount(value):
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return f'{value:.2f}'
    return value


class DonationBase(BaseModel):
    model_config = ConfigDict(extra='ignore', from_attributes=True)

    id: str
    amount: str
    user_id: str
    email: Optional[str] = None
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None


class CreateDonation(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: Optional[str] = Field(default=None, description='기부 id. 주어지지 않으면 UUID가 생성됩니다')
    amount: str = Field(description='기부 금액', examples=['12.00'])
    user_id: str
    email: Optional[str] = None

    @field_validator('amount', mode='before')
    @classmethod
    def validate_amount(cls, value):
        return _format_amount(value)


class UpdateDonation(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: Optional[str] = None
    amount: Optional[str] = None
    user_id: Optional[str] = None
    email: Optional[str] = None

    @field_validator('amount', mode='before')
    @classmethod
    def validate_amount(cls, value):
        return _format_amount(value)


class DonationOutput(MessageOutputBase):
    donation: DonationBase

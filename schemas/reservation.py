from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.base import MessageOutputBase


class ReservationBase(BaseModel):
    model_config = ConfigDict(extra='ignore', from_attributes=True)

    id: str
    datetime: str
    duration: str
    user_id: str
    room_id: str
    donation_id: Optional[str] = None


class CreateReservation(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: Optional[str] = Field(default=None, description='예약 id. 주어지지 않으면 UUID가 생성됩니다')
    datetime: str = Field(description='시작 시간', examples=['09122020:1000'])
    duration: str = Field(description='예약 시간', examples=['1hr'])
    user_id: str
    room_id: str
    donation_id: Optional[str] = Field(default=None, description='예약 중 기부를 한 경우의 기부 id')


class UpdateReservation(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: Optional[str] = None
    datetime: Optional[str] = None
    duration: Optional[str] = None
    user_id: Optional[str] = None
    room_id: Optional[str] = None
    donation_id: Optional[str] = None


class ReservationOutput(MessageOutputBase):
    reservation: ReservationBase

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.base import MessageOutputBase


class UserSummary(BaseModel):
    """
    유저 목록 / 단건 조회에 사용하는 projection 입니다.
    """
    model_config = ConfigDict(extra='ignore', from_attributes=True)

    id: str
    first_name: str
    last_name: str
    school: str
    bg_username: Optional[str] = None
    email: str
    phone: Optional[str] = None
    created_at: Optional[datetime.datetime] = None


class UserFull(UserSummary):
    """
    현재 로그인한 유저의 프로필, 생성 / 수정 결과에 사용하는 projection 입니다.
    """
    profile_url: str
    is_locked: bool
    praises: int
    demerits: int
    user_rating: int
    visits: int
    reservation_count: int
    role_id: Optional[int] = None
    updated_at: Optional[datetime.datetime] = None


class CreateUser(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: Optional[str] = Field(default=None, description='유저 id. 주어지지 않으면 UUID가 생성됩니다')
    first_name: str = Field(examples=['Shannan'])
    last_name: str = Field(examples=['Roe'])
    email: str = Field(examples=['shannan_roe@maildrop.cc'])
    school: Optional[str] = Field(default=None, examples=['Lambda School'])
    bg_username: Optional[str] = Field(default=None, examples=['ShannanRoe1928'])
    profile_url: Optional[str] = None
    phone: Optional[str] = Field(default=None, examples=['6510000000'])
    role_id: Optional[int] = None
    is_locked: Optional[bool] = None
    praises: Optional[int] = None
    demerits: Optional[int] = None
    user_rating: Optional[int] = None
    visits: Optional[int] = None
    reservation_count: Optional[int] = None


class UpdateUser(BaseModel):
    """
    부분 수정용 입력입니다. 전달된 필드만 변경됩니다.
    """
    model_config = ConfigDict(extra='ignore')

    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    school: Optional[str] = None
    bg_username: Optional[str] = None
    profile_url: Optional[str] = None
    phone: Optional[str] = None
    role_id: Optional[int] = None
    is_locked: Optional[bool] = None
    praises: Optional[int] = None
    demerits: Optional[int] = None
    user_rating: Optional[int] = None
    visits: Optional[int] = None
    reservation_count: Optional[int] = None


class UserOutput(MessageOutputBase):
    user: UserFull


class UserDeleteOutput(MessageOutputBase):
    user: UserSummary


class CurrentUserOutput(BaseModel):
    user: UserFull

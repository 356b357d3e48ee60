from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.params import Path
from sqlalchemy.orm import Session
from starlette import status

from db.database import get_db
from schemas import user
from service.user_service import UserService
from util import get_current_user

user_router = APIRouter(
    prefix='/users',
    tags=['Users'],
    dependencies=[Depends(get_current_user)]
)

current_user_router = APIRouter(
    prefix='/user',
    tags=['Users']
)


@user_router.get('', response_model=List[user.UserSummary], name='유저 목록 조회')
def get_users(db: Session = Depends(get_db)):
    """
    모든 유저들의 리스트를 반환합니다.
    """
    return UserService(db).get_all()


@user_router.get('/{user_id}', response_model=user.UserSummary, name='유저 조회', responses={
    404: {
        "description": "`user_id`값을 가진 유저가 없는 경우",
        "content": {
            "application/json": {
                "example": {"error": "UserNotFound"}
            }
        }
    }
})
def get_user(db: Session = Depends(get_db), user_id: str = Path(..., description='조회할 유저의 `id`')):
    return UserService(db).get(user_id)


@user_router.post('', response_model=user.UserOutput, status_code=status.HTTP_201_CREATED, name='유저 생성',
                  responses={
                      400: {
                          "description": "주어진 `id`를 가진 유저가 이미 존재하는 경우",
                          "content": {
                              "application/json": {
                                  "example": {"message": "User already exists."}
                              }
                          }
                      }
                  })
def create_user(create_user_request: user.CreateUser, db: Session = Depends(get_db)):
    """
    새로운 유저를 만듭니다. `id`가 주어지지 않으면 UUID를 생성합니다. `email`과 `bg_username`은 고유해야 합니다.
    """
    created = UserService(db).create(create_user_request)
    return {'message': 'User successfully created.', 'user': created}


@user_router.put('', response_model=user.UserOutput, name='유저 수정')
@user_router.put('/{user_id}', response_model=user.UserOutput, name='유저 수정')
def update_user(update_user_request: user.UpdateUser, db: Session = Depends(get_db),
                user_id: Optional[str] = None):
    """
    전달된 필드만 수정합니다. 수정할 유저의 `id`는 경로 또는 body로 전달합니다.
    """
    updated = UserService(db).update(user_id or update_user_request.id, update_user_request)
    return {'message': 'User updated.', 'user': updated}


@user_router.delete('/{user_id}', response_model=user.UserDeleteOutput, name='유저 삭제')
def delete_user(db: Session = Depends(get_db), user_id: str = Path(..., description='삭제할 유저의 `id`')):
    """
    유저를 삭제합니다. 유저의 예약과 기부 내역도 함께 삭제됩니다.
    """
    deleted = UserService(db).delete(user_id)
    return {'message': f"User '{user_id}' was deleted.", 'user': deleted}


@current_user_router.get('', response_model=user.CurrentUserOutput, name='내 정보 조회')
def get_me(current_user: user.UserFull = Depends(get_current_user)):
    """
    현재 로그인한 유저의 정보를 반환합니다. 처음 로그인한 유저는 이 때 자동으로 생성됩니다.
    """
    return {'user': current_user}

from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.params import Path
from sqlalchemy.orm import Session
from starlette import status

from db.database import get_db
from schemas import reservation
from service.reservation_service import ReservationService
from util import get_current_user

reservation_router = APIRouter(
    prefix='/reservations',
    tags=['Reservations'],
    dependencies=[Depends(get_current_user)]
)


@reservation_router.get('', response_model=List[reservation.ReservationBase], name='예약 목록 조회')
def get_reservations(db: Session = Depends(get_db)):
    return ReservationService(db).get_all()


@reservation_router.get('/{reservation_id}', response_model=reservation.ReservationBase, name='예약 조회',
                        responses={
                            404: {
                                "description": "`reservation_id`값을 가진 예약이 없는 경우",
                                "content": {
                                    "application/json": {
                                        "example": {"error": "ReservationNotFound"}
                                    }
                                }
                            }
                        })
def get_reservation(db: Session = Depends(get_db),
                    reservation_id: str = Path(..., description='조회할 예약의 `id`')):
    return ReservationService(db).get(reservation_id)


@reservation_router.post('', response_model=reservation.ReservationOutput, status_code=status.HTTP_201_CREATED,
                         name='예약 생성',
                         responses={
                             400: {
                                 "description": "주어진 `id`를 가진 예약이 이미 존재하는 경우",
                                 "content": {
                                     "application/json": {
                                         "example": {"message": "Reservation already exists."}
                                     }
                                 }
                             }
                         })
def create_reservation(create_reservation_request: reservation.CreateReservation, db: Session = Depends(get_db)):
    """
    공간을 예약합니다. `user_id`와 `room_id`는 존재하는 유저와 공간이어야 합니다.
    """
    created = ReservationService(db).create(create_reservation_request)
    return {'message': 'Reservation successfully created.', 'reservation': created}


@reservation_router.put('', response_model=reservation.ReservationOutput, name='예약 수정')
@reservation_router.put('/{reservation_id}', response_model=reservation.ReservationOutput, name='예약 수정')
def update_reservation(update_reservation_request: reservation.UpdateReservation, db: Session = Depends(get_db),
                       reservation_id: Optional[str] = None):
    updated = ReservationService(db).update(reservation_id or update_reservation_request.id,
                                            update_reservation_request)
    return {'message': 'Reservation updated.', 'reservation': updated}


@reservation_router.delete('/{reservation_id}', response_model=reservation.ReservationOutput, name='예약 삭제')
def delete_reservation(db: Session = Depends(get_db),
                       reservation_id: str = Path(..., description='삭제할 예약의 `id`')):
    deleted = ReservationService(db).delete(reservation_id)
    return {'message': f"Reservation '{reservation_id}' was deleted.", 'reservation': deleted}

from db.models import Reservation
from repository.base import CrudRepository
from schemas.reservation import ReservationBase


class ReservationRepository(CrudRepository):
    model = Reservation
    projection = ReservationBase

from repository.reservation_repository import ReservationRepository
from service.base import ResourceService


class ReservationService(ResourceService):
    resource_name = 'Reservation'
    repository_class = ReservationRepository

from db.models import Donation
from repository.base import CrudRepository
from schemas.donation import DonationBase


class DonationRepository(CrudRepository):
    model = Donation
    projection = DonationBase

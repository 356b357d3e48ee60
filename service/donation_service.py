from repository.donation_repository import DonationRepository
from service.base import ResourceService


class DonationService(ResourceService):
    resource_name = 'Donation'
    repository_class = DonationRepository

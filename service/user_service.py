from repository.user_repository import UserRepository
from service.base import ResourceService


class UserService(ResourceService):
    resource_name = 'User'
    repository_class = UserRepository

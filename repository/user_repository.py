import logging
from typing import Any, Dict, Optional

from db.models import User
from exceptions import ValidationError
from repository.base import CrudRepository
from schemas.user import UserFull, UserSummary

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('first_name', 'last_name', 'email')

DEFAULT_FIELDS = {
    'school': '',
    'bg_username': '',
    'profile_url': '',
    'is_locked': False,
    'praises': 0,
    'demerits': 0,
    'user_rating': 0,
    'visits': 0,
    'reservation_count': 0,
}

# blank values are stored as NULL so they do not collide on the unique index
NULLABLE_UNIQUE_FIELDS = ('bg_username', 'phone')


class UserRepository(CrudRepository):
    model = User
    projection = UserSummary
    detail_projection = UserFull

    def _prepare(self, values: Dict[str, Any]) -> Dict[str, Any]:
        for field in NULLABLE_UNIQUE_FIELDS:
            if field in values and values[field] == '':
                values[field] = None
        return values

    def get_full_by_filter(self, **filters) -> Optional[UserFull]:
        user = self._query().filter_by(**filters).first()
        return UserFull.model_validate(user) if user else None

    def find_or_create(self, filters: Dict[str, Any], payload: Dict[str, Any]) -> UserFull:
        """
        `filters`에 맞는 유저가 있으면 그대로 반환하고, 없으면 `payload`에 기본값을 채워 새로 생성합니다.
        """
        found = self.get_full_by_filter(**filters)
        if found:
            return found

        missing = [field for field in REQUIRED_FIELDS if payload.get(field) is None]
        if missing:
            raise ValidationError(f"Missing required user fields: {', '.join(missing)}", fields=missing)

        values = dict(DEFAULT_FIELDS)
        values.update({key: value for key, value in payload.items() if value is not None})

        user = self.create(values)
        logger.info('Created user %s for %s', user.id, user.email)
        return user

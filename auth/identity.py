import logging
from typing import Any, Dict

from auth.verifier import TokenVerifier
from exceptions import AuthenticationError, DuplicateRecordError
from repository.user_repository import UserRepository
from schemas.user import UserFull

logger = logging.getLogger(__name__)


def make_user_obj(claims: Dict[str, Any]) -> Dict[str, Any]:
    """
    토큰 claims로 새 유저의 기본 정보를 만듭니다. `name`은 첫 공백을 기준으로 이름과 성으로 나눕니다.
    """
    names = (claims.get('name') or '').split(None, 1)

    return {
        'id': claims.get('sub'),
        'first_name': names[0] if names else None,
        'last_name': names[1] if len(names) > 1 else '',
        'school': '',
        'bg_username': '',
        'profile_url': '',
        'email': claims.get('email'),
    }


class IdentityResolver:
    def __init__(self, verifier: TokenVerifier, users: UserRepository):
        self.verifier = verifier
        self.users = users

    def resolve(self, token: str) -> UserFull:
        """
        토큰을 검증하고 email로 로컬 유저를 찾습니다. 유저가 없으면 새로 만듭니다.
        어떤 이유로든 실패하면 `AuthenticationError`가 발생합니다.
        """
        try:
            claims = self.verifier.verify_access_token(token)
            candidate = make_user_obj(claims)
            if not candidate['email']:
                raise AuthenticationError('Token has no email claim.')
            return self._reconcile(candidate)
        except AuthenticationError as exc:
            logger.warning('Authentication failed: %s', exc.message)
            raise
        except Exception as exc:
            logger.warning('Authentication failed: %s', exc)
            raise AuthenticationError(str(exc)) from exc

    def _reconcile(self, candidate: Dict[str, Any]) -> UserFull:
        email = candidate['email']
        try:
            return self.users.find_or_create({'email': email}, candidate)
        except DuplicateRecordError:
            # another request provisioned the same user first
            user = self.users.get_full_by_filter(email=email)
            if user is None:
                raise AuthenticationError('Unable to create or find user.')
            return user

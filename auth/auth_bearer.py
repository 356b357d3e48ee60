from fastapi import Request
from fastapi.security import HTTPBearer

from exceptions import AuthenticationError


class JWTBearer(HTTPBearer):
    """
    `Authorization: Bearer <token>` 헤더에서 토큰을 꺼냅니다. 헤더가 없거나 형식이 잘못된 경우 401을 반환합니다.
    """

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> str:
        credentials = await super().__call__(request)
        if credentials is None or not credentials.credentials:
            raise AuthenticationError('Missing or malformed bearer token')
        return credentials.credentials

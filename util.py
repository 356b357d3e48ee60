import datetime

import jwt
from fastapi import Depends
from sqlalchemy.orm import Session

import config
from auth.auth_bearer import JWTBearer
from auth.identity import IdentityResolver
from auth.verifier import TokenVerifier, get_token_verifier
from db.database import get_db
from repository.user_repository import UserRepository
from schemas.user import UserFull


def encode_jwt(sub, email, name, expires_in=None):
    """
    shared secret으로 서명한 access token을 만듭니다. identity provider 없이 로컬에서 테스트할 때 사용합니다.
    """
    now = datetime.datetime.now(datetime.UTC)
    payload = {
        'sub': sub,
        'email': email,
        'name': name,
        'aud': config.OKTA_AUDIENCE,
        'iat': now,
        'exp': now + datetime.timedelta(seconds=config.JWT_EXPIRES_SECONDS if expires_in is None else expires_in)
    }
    if config.OKTA_URL_ISSUER:
        payload['iss'] = config.OKTA_URL_ISSUER

    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_jwt(token):
    return get_token_verifier().verify_access_token(token)


def get_identity_resolver(db: Session = Depends(get_db),
                          verifier: TokenVerifier = Depends(get_token_verifier)) -> IdentityResolver:
    return IdentityResolver(verifier, UserRepository(db))


def get_current_user(token: str = Depends(JWTBearer()),
                     resolver: IdentityResolver = Depends(get_identity_resolver)) -> UserFull:
    return resolver.resolve(token)

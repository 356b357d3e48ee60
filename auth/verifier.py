"""
Access token verification.

Tokens issued by the identity provider are RS256-signed and checked against its JWKS endpoint.
When no issuer is configured the verifier falls back to a shared HS256 secret, which is what
local development and the test-suite use.
"""
from functools import lru_cache
from typing import Any, Dict, List, Optional

import jwt
from jwt import PyJWKClient

import config


class TokenVerifier:
    def __init__(self, audience: str, issuer: Optional[str] = None, jwks_url: Optional[str] = None,
                 secret: Optional[str] = None, algorithms: Optional[List[str]] = None, leeway: int = 0):
        if not jwks_url and not secret:
            raise ValueError('TokenVerifier needs either a JWKS url or a shared secret')

        self.audience = audience
        self.issuer = issuer or None
        self.secret = secret
        self.leeway = leeway
        self.jwks_client = PyJWKClient(jwks_url) if jwks_url else None
        self.algorithms = algorithms or (['RS256'] if self.jwks_client else ['HS256'])

    def _signing_key(self, token: str):
        if self.jwks_client:
            return self.jwks_client.get_signing_key_from_jwt(token).key
        return self.secret

    def verify_access_token(self, token: str) -> Dict[str, Any]:
        """
        토큰의 서명, 만료 시간, audience(와 issuer)를 검증하고 claims를 반환합니다.
        검증에 실패하면 `jwt.PyJWTError`가 발생합니다.
        """
        return jwt.decode(
            token,
            self._signing_key(token),
            algorithms=self.algorithms,
            audience=self.audience,
            issuer=self.issuer,
            leeway=self.leeway,
            options={'require': ['exp', 'sub']},
        )


@lru_cache
def get_token_verifier() -> TokenVerifier:
    if config.OKTA_JWKS_URL:
        return TokenVerifier(audience=config.OKTA_AUDIENCE, issuer=config.OKTA_URL_ISSUER,
                             jwks_url=config.OKTA_JWKS_URL)

    return TokenVerifier(audience=config.OKTA_AUDIENCE, issuer=config.OKTA_URL_ISSUER,
                         secret=config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])

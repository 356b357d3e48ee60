import os

from dotenv import load_dotenv

load_dotenv()

SQLALCHEMY_DATABASE_URL = os.environ.get('SQLALCHEMY_DATABASE_URL', 'sqlite:///./community.db')

# identity provider
OKTA_URL_ISSUER = os.environ.get('OKTA_URL_ISSUER', '')
OKTA_AUDIENCE = os.environ.get('OKTA_AUDIENCE', 'api://default')
OKTA_JWKS_URL = os.environ.get('OKTA_JWKS_URL') or (f'{OKTA_URL_ISSUER.rstrip("/")}/v1/keys' if OKTA_URL_ISSUER else '')

# shared-secret tokens, used when no issuer is configured (local development / tests)
JWT_SECRET = os.environ.get('JWT_SECRET', 'change-me')
JWT_ALGORITHM = os.environ.get('JWT_ALGORITHM', 'HS256')
JWT_EXPIRES_SECONDS = int(os.environ.get('JWT_EXPIRES_SECONDS', str(60 * 60 * 24)))

ENVIRONMENT = os.environ.get('environment', 'dev')
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

import os

# must be set before the application modules read their configuration
os.environ['environment'] = 'test'
os.environ['SQLALCHEMY_DATABASE_URL'] = 'sqlite://'
os.environ['OKTA_URL_ISSUER'] = ''
os.environ['OKTA_JWKS_URL'] = ''
os.environ['OKTA_AUDIENCE'] = 'api://default'
os.environ['JWT_SECRET'] = 'test-secret-key-for-community-space-api-tokens'
os.environ['JWT_ALGORITHM'] = 'HS256'

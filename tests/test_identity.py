import jwt
import pytest

from auth.identity import IdentityResolver, make_user_obj
from db.models import User
from exceptions import AuthenticationError, DuplicateRecordError
from repository.user_repository import UserRepository
from util import get_token_verifier
from tests.test_main import app, client, test_db_with_users, TestingSessionLocal, ADMIN_ID


class FakeTokenVerifier:
    def __init__(self, claims=None, error=None):
        self.claims = claims
        self.error = error

    def verify_access_token(self, token):
        if self.error:
            raise self.error
        return self.claims


class TestMakeUserObj:
    def test_make_user_obj_should_split_name(self):
        user = make_user_obj({'sub': 'abc', 'email': 'john@doe.com', 'name': 'John Ronald Doe'})

        assert user['id'] == 'abc'
        assert user['first_name'] == 'John'
        assert user['last_name'] == 'Ronald Doe'
        assert user['email'] == 'john@doe.com'
        assert user['school'] == ''

    def test_make_user_obj_should_allow_single_word_name(self):
        user = make_user_obj({'sub': 'abc', 'email': 'cher@example.com', 'name': 'Cher'})

        assert user['first_name'] == 'Cher'
        assert user['last_name'] == ''

    def test_make_user_obj_without_name(self):
        user = make_user_obj({'sub': 'abc', 'email': 'nobody@example.com'})

        assert user['first_name'] is None


class TestIdentityResolver:
    def test_resolve_should_return_existing_user_by_email(self, test_db_with_users):
        session = TestingSessionLocal()
        verifier = FakeTokenVerifier({'sub': 'okta-subject', 'email': 'lambda@labs.com', 'name': 'Ana Carillo'})

        user = IdentityResolver(verifier, UserRepository(session)).resolve('token')

        assert user.id == ADMIN_ID
        assert session.query(User).count() == 2
        session.close()

    def test_resolve_should_create_user_once(self, test_db_with_users):
        session = TestingSessionLocal()
        verifier = FakeTokenVerifier({'sub': 'new-subject', 'email': 'new@maildrop.cc', 'name': 'New Person'})
        resolver = IdentityResolver(verifier, UserRepository(session))

        first = resolver.resolve('token')
        second = resolver.resolve('token')

        assert first.id == second.id == 'new-subject'
        assert first.bg_username is None
        assert session.query(User).filter_by(email='new@maildrop.cc').count() == 1
        session.close()

    def test_resolve_should_wrap_verification_errors(self, test_db_with_users):
        session = TestingSessionLocal()
        verifier = FakeTokenVerifier(error=jwt.InvalidAudienceError('Audience doesn\'t match'))

        with pytest.raises(AuthenticationError) as exception_info:
            IdentityResolver(verifier, UserRepository(session)).resolve('token')

        assert exception_info.value.message == "Audience doesn't match"
        session.close()

    def test_resolve_should_reject_token_without_email(self, test_db_with_users):
        session = TestingSessionLocal()
        verifier = FakeTokenVerifier({'sub': 'abc', 'name': 'No Mail'})

        with pytest.raises(AuthenticationError):
            IdentityResolver(verifier, UserRepository(session)).resolve('token')
        session.close()

    def test_resolve_should_wrap_reconciliation_errors(self, test_db_with_users):
        session = TestingSessionLocal()
        verifier = FakeTokenVerifier({'sub': 'abc', 'email': 'nameless@maildrop.cc'})

        with pytest.raises(AuthenticationError) as exception_info:
            IdentityResolver(verifier, UserRepository(session)).resolve('token')

        assert 'first_name' in exception_info.value.message
        session.close()

    def test_resolve_should_lookup_again_when_create_loses_race(self, test_db_with_users, monkeypatch):
        session = TestingSessionLocal()
        users = UserRepository(session)
        verifier = FakeTokenVerifier({'sub': 'other-subject', 'email': 'llama001@maildrop.cc', 'name': 'A B'})

        def racing_find_or_create(filters, payload):
            raise DuplicateRecordError('UNIQUE constraint failed: users.email')

        monkeypatch.setattr(users, 'find_or_create', racing_find_or_create)

        user = IdentityResolver(verifier, users).resolve('token')

        assert user.email == 'llama001@maildrop.cc'
        session.close()

    def test_resolve_should_fail_when_race_leaves_no_user(self, test_db_with_users, monkeypatch):
        session = TestingSessionLocal()
        users = UserRepository(session)
        verifier = FakeTokenVerifier({'sub': 'ghost', 'email': 'ghost@maildrop.cc', 'name': 'Ghost User'})

        def racing_find_or_create(filters, payload):
            raise DuplicateRecordError('UNIQUE constraint failed: users.id')

        monkeypatch.setattr(users, 'find_or_create', racing_find_or_create)

        with pytest.raises(AuthenticationError) as exception_info:
            IdentityResolver(verifier, users).resolve('token')

        assert exception_info.value.message == 'Unable to create or find user.'
        session.close()


class TestTokenVerifierOverride:
    def test_routes_should_use_injected_verifier(self, test_db_with_users):
        app.dependency_overrides[get_token_verifier] = lambda: FakeTokenVerifier(
            {'sub': ADMIN_ID, 'email': 'lambda@labs.com', 'name': 'Ana Carillo'})
        try:
            response = client.get("/user", headers={"Authorization": "Bearer anything"})
        finally:
            del app.dependency_overrides[get_token_verifier]

        assert response.status_code == 200, response.text
        assert response.json()['user']['id'] == ADMIN_ID

    def test_routes_should_return_401_when_injected_verifier_rejects(self, test_db_with_users):
        app.dependency_overrides[get_token_verifier] = lambda: FakeTokenVerifier(
            error=jwt.ExpiredSignatureError('Signature has expired'))
        try:
            response = client.get("/users", headers={"Authorization": "Bearer anything"})
        finally:
            del app.dependency_overrides[get_token_verifier]

        assert response.status_code == 401, response.text
        assert response.json() == {'error': 'Unauthorized', 'message': 'Signature has expired'}

"""Access token codec and password hasher."""
import time
import uuid
from datetime import timedelta

import jwt
import pytest

from chirpy.utils.password_hasher import PasswordHasher
from conftest import OTHER_SECRET, SECRET
from utils.exceptions import (
    AuthenticationError,
    ExpiredTokenError,
    InvalidTokenError,
)
from utils.security import TOKEN_ISSUER, make_jwt, validate_jwt


@pytest.fixture(scope="module")
def hasher():
    return PasswordHasher()


class TestPasswordHasher:

    def test_verify_accepts_own_hash(self, hasher):
        hashed = hasher.hash("secret123")
        assert hashed != "secret123"
        assert hasher.verify("secret123", hashed) is True

    def test_verify_rejects_other_password(self, hasher):
        hashed = hasher.hash("secret123")
        with pytest.raises(AuthenticationError):
            hasher.verify("secret124", hashed)

    def test_same_password_hashes_differently(self, hasher):
        assert hasher.hash("secret123") != hasher.hash("secret123")

    def test_malformed_hash_looks_like_wrong_password(self, hasher):
        with pytest.raises(AuthenticationError) as bad_hash:
            hasher.verify("secret123", "not-a-hash")
        with pytest.raises(AuthenticationError) as bad_password:
            hasher.verify("nope", hasher.hash("secret123"))
        assert str(bad_hash.value) == str(bad_password.value)
        assert bad_hash.value.reason == "invalid_hash"


class TestAccessTokens:

    def test_round_trip(self):
        user_id = uuid.uuid4()
        token = make_jwt(user_id, SECRET, timedelta(minutes=5))
        assert validate_jwt(token, SECRET) == user_id

    def test_round_trip_accepts_string_ids(self):
        user_id = uuid.uuid4()
        token = make_jwt(str(user_id), SECRET, timedelta(seconds=30))
        assert validate_jwt(token, SECRET) == user_id

    def test_claims(self):
        user_id = uuid.uuid4()
        token = make_jwt(user_id, SECRET, timedelta(minutes=10))
        claims = jwt.decode(token, options={"verify_signature": False})
        assert claims["iss"] == TOKEN_ISSUER
        assert claims["sub"] == str(user_id)
        assert claims["exp"] - claims["iat"] == 600
        assert token.count(".") == 2

    def test_ttl_capped_at_one_hour(self):
        token = make_jwt(uuid.uuid4(), SECRET, timedelta(days=1))
        claims = jwt.decode(token, options={"verify_signature": False})
        assert claims["exp"] - claims["iat"] == 3600

    def test_negative_ttl_is_expired(self):
        token = make_jwt(uuid.uuid4(), SECRET, timedelta(seconds=-1))
        with pytest.raises(ExpiredTokenError):
            validate_jwt(token, SECRET)

    def test_short_ttl_expires(self):
        token = make_jwt(uuid.uuid4(), SECRET, timedelta(seconds=1))
        time.sleep(2)
        with pytest.raises(ExpiredTokenError):
            validate_jwt(token, SECRET)

    def test_wrong_secret(self):
        token = make_jwt(uuid.uuid4(), SECRET, timedelta(minutes=5))
        with pytest.raises(InvalidTokenError):
            validate_jwt(token, OTHER_SECRET)

    def test_garbage_token(self):
        with pytest.raises(InvalidTokenError):
            validate_jwt("not.a.token", SECRET)

    def test_subject_must_be_uuid(self):
        token = make_jwt("user-42", SECRET, timedelta(minutes=5))
        with pytest.raises(InvalidTokenError) as exc:
            validate_jwt(token, SECRET)
        assert exc.value.reason == "bad_subject"

    def test_foreign_issuer_rejected(self):
        now = int(time.time())
        token = jwt.encode(
            {"iss": "someone-else", "sub": str(uuid.uuid4()), "iat": now, "exp": now + 60},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            validate_jwt(token, SECRET)

    def test_missing_expiry_rejected(self):
        token = jwt.encode(
            {"iss": TOKEN_ISSUER, "sub": str(uuid.uuid4()), "iat": int(time.time())},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            validate_jwt(token, SECRET)

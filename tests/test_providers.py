import uuid

import jwt
import pytest

from app.models.enums import UserRole
from app.schemas.auth import UserPrincipal
from app.services.providers.password_encoder import BcryptPasswordEncoder
from app.services.providers.token_provider import JwtTokenProvider
from app.settings.app import AppSettings

SECRET = "tests-secret-key-with-enough-bytes-for-hs256"


@pytest.fixture()
def settings() -> AppSettings:
    return AppSettings(jwt_secret=SECRET, bcrypt_rounds=4, jwt_expire_minutes=5)


def test_password_hash_round_trip(settings: AppSettings):
    encoder = BcryptPasswordEncoder(settings)

    hashed = encoder.hash_password("Sup3rSecurePwd!")

    assert hashed != "Sup3rSecurePwd!"
    assert hashed.startswith("$2b$04$")
    assert encoder.verify("Sup3rSecurePwd!", hashed)
    assert not encoder.verify("wrong", hashed)


def test_verify_rejects_malformed_hash(settings: AppSettings):
    assert not BcryptPasswordEncoder(settings).verify("secret", "not-a-hash")


def test_token_carries_principal_and_expiry(settings: AppSettings):
    provider = JwtTokenProvider(settings)
    principal = UserPrincipal(user_id=uuid.uuid4(), role=UserRole.ADMIN)

    token = provider.encode_token(principal)

    assert provider.decode_token(token) == principal
    claims = jwt.decode(token, key=SECRET, algorithms=["HS256"])
    assert "exp" in claims


def test_expired_token_is_rejected(settings: AppSettings):
    provider = JwtTokenProvider(settings.model_copy(update={"jwt_expire_minutes": -1}))
    token = provider.encode_token(UserPrincipal(user_id=uuid.uuid4(), role=UserRole.USER))

    with pytest.raises(jwt.ExpiredSignatureError):
        provider.decode_token(token)


def test_token_signed_with_another_secret_is_rejected(settings: AppSettings):
    token = JwtTokenProvider(
        AppSettings(jwt_secret="another-secret-key-with-enough-bytes-for-hs256")
    ).encode_token(UserPrincipal(user_id=uuid.uuid4(), role=UserRole.USER))

    with pytest.raises(jwt.InvalidSignatureError):
        JwtTokenProvider(settings).decode_token(token)

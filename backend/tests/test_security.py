import jwt
import pytest

from src.infrastructure.security import JwtTokenService, PasslibPasswordHasher


@pytest.mark.anyio
async def test_hash_and_verify():
    hasher = PasslibPasswordHasher(rounds=4)
    digest = await hasher.hash("pass1")

    assert digest != "pass1"
    assert await hasher.verify("pass1", digest)
    assert not await hasher.verify("wrong", digest)


@pytest.mark.anyio
async def test_verify_against_garbage_digest_is_false():
    hasher = PasslibPasswordHasher(rounds=4)
    assert not await hasher.verify("pass1", "not-a-bcrypt-digest")


def test_token_round_trip_and_lifetime():
    service = JwtTokenService(secret="s3cret", ttl_seconds=3600)
    token = service.issue("Alice")

    assert service.validate(token) == "Alice"
    claims = jwt.decode(token, "s3cret", algorithms=["HS256"])
    assert claims["username"] == "Alice"
    assert claims["exp"] - claims["iat"] == 3600


def test_expired_token_is_rejected():
    service = JwtTokenService(secret="s3cret", ttl_seconds=-10)
    assert service.validate(service.issue("alice")) is None


def test_token_without_username_is_rejected():
    token = jwt.encode({"iat": 0, "exp": 9999999999}, "s3cret", algorithm="HS256")
    assert JwtTokenService(secret="s3cret").validate(token) is None


def test_secret_is_required():
    with pytest.raises(ValueError):
        JwtTokenService(secret="")

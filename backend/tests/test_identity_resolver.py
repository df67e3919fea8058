import pytest

from src.domain.exceptions import InvalidCredentialError, UnauthenticatedError
from src.domain.services.identity_resolver import IdentityResolver
from src.domain.value_objects import GUEST, Identity, Username
from src.infrastructure.security import JwtTokenService

from conftest import JWT_SECRET, make_token

resolver = IdentityResolver(JwtTokenService(secret=JWT_SECRET))


def test_valid_token_resolves_to_identity_in_both_modes():
    token = make_token("alice")
    expected = Identity(Username("alice"))
    assert resolver.resolve_mandatory(token) == expected
    assert resolver.resolve_optional(token) == expected


@pytest.mark.parametrize("credential", [None, ""])
def test_missing_credential(credential):
    assert resolver.resolve_optional(credential) is GUEST
    with pytest.raises(UnauthenticatedError, match="Please log in"):
        resolver.resolve_mandatory(credential)


@pytest.mark.parametrize(
    "credential",
    [
        "not-a-jwt",
        make_token("alice", secret="some-other-secret"),
        make_token("alice", expires_in=-60),
    ],
)
def test_bad_credential(credential):
    assert resolver.resolve_optional(credential) is GUEST
    with pytest.raises(InvalidCredentialError, match="Invalid or expired token"):
        resolver.resolve_mandatory(credential)

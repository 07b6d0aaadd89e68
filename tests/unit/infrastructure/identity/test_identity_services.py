"""Unit tests for the JWT token service and the peppered password hasher."""

from datetime import timedelta

from mediashelf.infrastructure.identity.services.password_service import PepperedPasswordHasher
from mediashelf.infrastructure.identity.services.token_service import JWTTokenService


class TestJWTTokenService:
    def test_token_pair_round_trips_user_id(self) -> None:
        service = JWTTokenService("access-secret", "refresh-secret")

        pair = service.create_token_pair(7)

        assert service.verify_access_token(pair.access_token) == 7
        assert service.verify_refresh_token(pair.refresh_token) == 7
        assert pair.token_type == "bearer"

    def test_tokens_are_not_interchangeable(self) -> None:
        service = JWTTokenService("shared-secret")

        pair = service.create_token_pair(7)

        assert service.verify_refresh_token(pair.access_token) is None
        assert service.verify_access_token(pair.refresh_token) is None

    def test_expired_token_rejected(self) -> None:
        service = JWTTokenService("access-secret", access_ttl=timedelta(seconds=-1))

        pair = service.create_token_pair(7)

        assert service.verify_access_token(pair.access_token) is None

    def test_expires_in_matches_access_ttl(self) -> None:
        service = JWTTokenService("access-secret", access_ttl=timedelta(minutes=5))

        assert service.create_token_pair(1).expires_in == 300

    def test_garbage_token_rejected(self) -> None:
        assert JWTTokenService("access-secret").verify_access_token("not-a-jwt") is None


class TestPepperedPasswordHasher:
    def test_verify_matching_password(self) -> None:
        hasher = PepperedPasswordHasher(pepper="pepper")

        hashed = hasher.hash_password("correct-horse")

        assert hasher.verify_password("correct-horse", hashed)
        assert not hasher.verify_password("wrong-horse", hashed)

    def test_pepper_is_part_of_the_hash(self) -> None:
        hashed = PepperedPasswordHasher(pepper="one").hash_password("correct-horse")

        assert not PepperedPasswordHasher(pepper="two").verify_password("correct-horse", hashed)

    def test_unknown_hash_format_is_a_mismatch(self) -> None:
        assert not PepperedPasswordHasher().verify_password("anything", "plain-text")

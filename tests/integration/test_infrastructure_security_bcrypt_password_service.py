"""Integration tests for Bcrypt password hashing service.

Tests run against the real bcrypt library (no mocking). Cost factor 4
keeps them fast; the format and verification behavior is identical.
"""

import pytest

from credential_service.infrastructure.security import BcryptPasswordService


@pytest.mark.integration
class TestBcryptPasswordServiceIntegration:
    """Integration tests for Bcrypt password service."""

    # =========================================================================
    # Construction
    # =========================================================================

    @pytest.mark.parametrize("cost_factor", [3, 32])
    def test_rejects_cost_outside_bcrypt_range(self, cost_factor):
        """Test cost factors outside 4..31 are rejected."""
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost_factor)

    def test_cost_factor_property(self):
        """Test configured cost is exposed."""
        assert BcryptPasswordService(cost_factor=5).cost_factor == 5

    # =========================================================================
    # Password Hashing Tests
    # =========================================================================

    def test_hash_password_creates_bcrypt_hash(self):
        """Test that hashed password has valid bcrypt format."""
        service = BcryptPasswordService(cost_factor=4)

        password_hash = service.hash_password("SecurePass123!")

        # Bcrypt format: $2b$04$...
        assert password_hash.startswith("$2b$04$")
        assert len(password_hash) == 60

    def test_hash_password_creates_unique_salts(self):
        """Test that hashing same password twice produces different hashes."""
        service = BcryptPasswordService(cost_factor=4)

        hash1 = service.hash_password("SecurePass123!")
        hash2 = service.hash_password("SecurePass123!")

        assert hash1 != hash2

    # =========================================================================
    # Password Verification Tests
    # =========================================================================

    def test_verify_password_accepts_correct_password(self):
        """Test correct password verifies against its hash."""
        service = BcryptPasswordService(cost_factor=4)
        password_hash = service.hash_password("Ünïcode9$x")

        assert service.verify_password("Ünïcode9$x", password_hash) is True

    def test_verify_password_rejects_wrong_password(self):
        """Test wrong password fails verification."""
        service = BcryptPasswordService(cost_factor=4)
        password_hash = service.hash_password("SecurePass123!")

        assert service.verify_password("SecurePass124!", password_hash) is False

    def test_verify_password_works_across_cost_factors(self):
        """Test a hash made at one cost verifies with a service at another."""
        password_hash = BcryptPasswordService(cost_factor=5).hash_password("Valid1Pass!")

        assert (
            BcryptPasswordService(cost_factor=4).verify_password(
                "Valid1Pass!", password_hash
            )
            is True
        )

    @pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$04$short"])
    def test_verify_password_malformed_hash_returns_false(self, bad_hash):
        """Test malformed stored hashes fail closed instead of raising."""
        service = BcryptPasswordService(cost_factor=4)

        assert service.verify_password("Valid1Pass!", bad_hash) is False

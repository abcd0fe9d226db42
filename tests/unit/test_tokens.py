"""Tests for management API credential resolution."""

import base64
import hashlib
import hmac
from datetime import datetime, timezone

import pytest

from portal_media_sync.exceptions import MissingCredentialError
from portal_media_sync.tokens import format_expiry, generate_sas_token, resolve_credential


FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)


def _fixed_clock() -> datetime:
    return FIXED_NOW


def _expected_signature(identifier: str, key: str, expiry: str) -> str:
    digest = hmac.new(key.encode(), f"{identifier}\n{expiry}".encode(), hashlib.sha512).digest()
    return base64.b64encode(digest).decode()


class TestExplicitToken:
    def test_token_returned_unchanged(self):
        token = "SharedAccessSignature integration&202401020304&abc=="
        assert resolve_credential(token, "integration", "secret") == token

    def test_token_wins_over_id_and_key(self):
        result = resolve_credential("my-token", "integration", "secret", clock=_fixed_clock)
        assert result == "my-token"


class TestGeneratedToken:
    def test_format_matches_shared_access_signature(self):
        token = resolve_credential(None, "integration", "secret", clock=_fixed_clock)

        expiry = "2024-01-02T04:04:05.1234560Z"
        signature = _expected_signature("integration", "secret", expiry)
        assert token == f"SharedAccessSignature uid=integration&ex={expiry}&sn={signature}"

    def test_is_deterministic_for_fixed_clock(self):
        first = generate_sas_token("integration", "secret", clock=_fixed_clock)
        second = generate_sas_token("integration", "secret", clock=_fixed_clock)
        assert first == second

    def test_custom_expiry_window(self):
        token = generate_sas_token("integration", "secret", expires_in=60, clock=_fixed_clock)
        assert "&ex=2024-01-02T03:05:05.1234560Z&" in token

    def test_different_keys_give_different_signatures(self):
        a = generate_sas_token("integration", "key-a", clock=_fixed_clock)
        b = generate_sas_token("integration", "key-b", clock=_fixed_clock)
        assert a != b

    def test_naive_clock_is_treated_as_utc(self):
        naive = generate_sas_token(
            "integration", "secret", clock=lambda: FIXED_NOW.replace(tzinfo=None)
        )
        aware = generate_sas_token("integration", "secret", clock=_fixed_clock)
        assert naive == aware


class TestFormatExpiry:
    def test_seven_fractional_digits_and_z(self):
        assert format_expiry(datetime(2030, 5, 6, 7, 8, 9, 0)) == "2030-05-06T07:08:09.0000000Z"

    def test_converts_other_timezones_to_utc(self):
        from datetime import timedelta

        plus_two = timezone(timedelta(hours=2))
        value = datetime(2030, 5, 6, 9, 8, 9, 1, tzinfo=plus_two)
        assert format_expiry(value) == "2030-05-06T07:08:09.0000010Z"


class TestMissingCredential:
    @pytest.mark.parametrize(
        ("token", "identifier", "key"),
        [
            (None, None, None),
            ("", "", ""),
            (None, "integration", None),
            (None, None, "secret"),
        ],
    )
    def test_raises_missing_credential(self, token, identifier, key):
        with pytest.raises(MissingCredentialError, match="token or id AND key"):
            resolve_credential(token, identifier, key)

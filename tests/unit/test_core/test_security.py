"""Tests for session tokens and the error taxonomy."""
from datetime import timedelta
from types import SimpleNamespace
from unittest.mock import Mock

import jwt
import pytest

from schoolvote.core import config
from schoolvote.core.exceptions import (
    AlreadyVoted,
    ElectionError,
    NotEligible,
    SelfDeletion,
    Unauthenticated,
    ValidationError,
)
from schoolvote.core.security import (
    create_access_token,
    create_session_token,
    decode_session_token,
    get_session_payload,
    session_claims,
)


def _user(**overrides):
    fields = dict(id=7, is_admin=False, has_voted=True, school_level="juniorHigh", grade_level=8)
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.mark.unit
class TestSessionTokens:
    """Test session token creation and decoding."""

    def test_claims_snapshot_user_state(self):
        assert session_claims(_user()) == {
            "sub": "7",
            "is_admin": False,
            "has_voted": True,
            "school_level": "juniorHigh",
            "grade_level": 8,
        }

    def test_round_trip(self):
        payload = decode_session_token(create_session_token(_user()))

        assert payload["sub"] == "7"
        assert payload["school_level"] == "juniorHigh"
        assert "exp" in payload

    def test_expired_token(self):
        token = create_access_token({"sub": "7"}, expires_delta=timedelta(seconds=-10))

        with pytest.raises(Unauthenticated, match="Session expired"):
            decode_session_token(token)

    def test_wrong_signature(self):
        token = jwt.encode({"sub": "7"}, "some-other-secret-key-of-enough-length", algorithm=config.settings.ALGORITHM)

        with pytest.raises(Unauthenticated, match="Invalid session"):
            decode_session_token(token)

    def test_missing_subject(self):
        token = create_access_token({"is_admin": True})

        with pytest.raises(Unauthenticated, match="Invalid session"):
            decode_session_token(token)

    def test_no_cookie_means_no_session(self):
        request = Mock()
        request.cookies = {}

        assert get_session_payload(request) is None

    def test_cookie_is_decoded(self):
        request = Mock()
        request.cookies = {config.settings.SESSION_COOKIE_NAME: create_session_token(_user(id=3))}

        assert get_session_payload(request)["sub"] == "3"


@pytest.mark.unit
class TestErrorTaxonomy:
    """Test the typed election errors."""

    def test_code_is_class_name(self):
        assert AlreadyVoted().code == "AlreadyVoted"
        assert SelfDeletion().code == "SelfDeletion"

    def test_status_codes(self):
        assert Unauthenticated.status_code == 401
        assert NotEligible.status_code == 403
        assert AlreadyVoted.status_code == 409
        assert SelfDeletion.status_code == 400

    def test_default_and_custom_messages(self):
        assert AlreadyVoted().message == "You have already voted for this position"
        assert Unauthenticated("Session expired").message == "Session expired"

    def test_hierarchy(self):
        assert issubclass(SelfDeletion, ValidationError)
        assert issubclass(ValidationError, ElectionError)

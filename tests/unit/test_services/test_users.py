"""Unit tests for user service."""
import pytest

from schoolvote.core.exceptions import (
    DuplicateKey,
    NotFound,
    SelfDeletion,
    Unauthenticated,
    ValidationError,
)
from schoolvote.db.models import User
from schoolvote.services.users import (
    authenticate_user,
    create_user,
    create_users_bulk,
    delete_user,
    ensure_admin_user,
    select_school_level,
    update_user,
)
from schoolvote.services.vote import reset_user_vote
from tests.utils import make_candidate, make_partylist, make_position, make_user, make_vote, vote_count


@pytest.mark.unit
class TestCreateUser:
    """Test create_user and create_users_bulk."""

    def test_create_student(self, db_session):
        user = create_user(db_session, name="Ana", reference_number="R1",
                           school_level="juniorHigh", grade_level=9)

        assert user.id is not None
        assert user.has_voted is False
        assert user.is_admin is False

    def test_duplicate_reference_number(self, db_session):
        create_user(db_session, name="Ana", reference_number="R1")

        with pytest.raises(DuplicateKey):
            create_user(db_session, name="Ben", reference_number="R1")

        assert db_session.query(User).filter(User.reference_number == "R1").count() == 1

    def test_grade_outside_level(self, db_session):
        with pytest.raises(ValidationError, match="Grade 11 is not part of elementary"):
            create_user(db_session, name="Ana", reference_number="R1",
                        school_level="elementary", grade_level=11)

    def test_grade_without_level(self, db_session):
        with pytest.raises(ValidationError):
            create_user(db_session, name="Ana", reference_number="R1", grade_level=5)

    def test_bulk_skips_duplicates(self, db_session):
        make_user(db_session, reference_number="EXISTING")

        results = create_users_bulk(db_session, [
            {"name": "Ana", "reference_number": "NEW-1"},
            {"name": "Ben", "reference_number": "EXISTING"},
            {"name": "Cy", "reference_number": "NEW-1"},
            {"name": "Di", "reference_number": "NEW-2", "school_level": "elementary", "grade_level": 12},
        ])

        assert [r["success"] for r in results] == [True, False, False, False]
        assert results[0]["name"] == "Ana"
        assert results[1]["message"] == "User with this reference number already exists"
        assert results[3]["reference_number"] == "NEW-2"
        assert db_session.query(User).count() == 2


@pytest.mark.unit
class TestAuthenticateUser:
    """Test authenticate_user."""

    def test_valid_credentials(self, db_session):
        user = make_user(db_session, name="Juan Dela Cruz", reference_number="2025-0142")
        assert authenticate_user(db_session, "Juan Dela Cruz", "2025-0142").id == user.id

    def test_name_is_case_insensitive(self, db_session):
        user = make_user(db_session, name="Juan Dela Cruz", reference_number="2025-0142")
        assert authenticate_user(db_session, "juan dela cruz", "2025-0142").id == user.id

    def test_wrong_name(self, db_session):
        make_user(db_session, name="Juan Dela Cruz", reference_number="2025-0142")
        with pytest.raises(Unauthenticated, match="Invalid credentials"):
            authenticate_user(db_session, "Pedro", "2025-0142")

    def test_unknown_reference_number(self, db_session):
        with pytest.raises(Unauthenticated):
            authenticate_user(db_session, "Juan", "nope")


@pytest.mark.unit
class TestUpdateUser:
    """Test update_user and select_school_level."""

    def test_partial_update(self, db_session, student):
        user = update_user(db_session, student.id, {"name": "Renamed"})
        assert user.name == "Renamed"
        assert user.reference_number == "2025-0001"

    def test_reference_number_taken(self, db_session, student):
        make_user(db_session, reference_number="TAKEN")
        with pytest.raises(DuplicateKey):
            update_user(db_session, student.id, {"reference_number": "TAKEN"})

    def test_keeping_own_reference_number(self, db_session, student):
        user = update_user(db_session, student.id, {"reference_number": "2025-0001", "grade_level": 5})
        assert user.grade_level == 5

    def test_level_change_checked_against_stored_grade(self, db_session, student):
        with pytest.raises(ValidationError):
            update_user(db_session, student.id, {"school_level": "seniorHigh"})

    def test_unknown_user(self, db_session):
        with pytest.raises(NotFound, match="User not found"):
            update_user(db_session, 999, {"name": "X"})

    def test_select_school_level(self, db_session):
        user = make_user(db_session, school_level=None, grade_level=None)

        updated = select_school_level(db_session, user.id, "seniorHigh", 12)

        assert updated.school_level == "seniorHigh"
        assert updated.grade_level == 12

    def test_select_mismatched_grade(self, db_session):
        user = make_user(db_session, school_level=None, grade_level=None)
        with pytest.raises(ValidationError):
            select_school_level(db_session, user.id, "juniorHigh", 3)

    def test_level_locked_after_voting(self, db_session, student):
        partylist = make_partylist(db_session)
        position = make_position(db_session, school_levels=["elementary"])
        make_vote(db_session, student, make_candidate(db_session, position, partylist))

        with pytest.raises(ValidationError, match="cannot change after voting"):
            select_school_level(db_session, student.id, "seniorHigh", 11)
        with pytest.raises(ValidationError):
            select_school_level(db_session, student.id, "elementary", 5)

        db_session.refresh(student)
        assert (student.school_level, student.grade_level) == ("elementary", 4)

    def test_reselecting_same_level_after_voting(self, db_session, student):
        partylist = make_partylist(db_session)
        make_vote(db_session, student, make_candidate(db_session, make_position(db_session), partylist))

        user = select_school_level(db_session, student.id, "elementary", 4)

        assert user.grade_level == 4

    def test_reset_unlocks_level(self, db_session, student):
        partylist = make_partylist(db_session)
        make_vote(db_session, student, make_candidate(db_session, make_position(db_session), partylist))
        reset_user_vote(db_session, student.id)

        user = select_school_level(db_session, student.id, "seniorHigh", 11)

        assert user.school_level == "seniorHigh"


@pytest.mark.unit
class TestDeleteUser:
    """Test delete_user and ensure_admin_user."""

    def test_delete_removes_votes(self, db_session, admin_user, student):
        partylist = make_partylist(db_session)
        position = make_position(db_session)
        candidate = make_candidate(db_session, position, partylist)
        make_vote(db_session, student, candidate)
        student_id = student.id

        delete_user(db_session, student_id, actor_id=admin_user.id)

        assert db_session.get(User, student_id) is None
        assert vote_count(db_session, user_id=student_id) == 0

    def test_cannot_delete_self(self, db_session, admin_user):
        with pytest.raises(SelfDeletion, match="Cannot delete your own account"):
            delete_user(db_session, admin_user.id, actor_id=admin_user.id)
        assert db_session.get(User, admin_user.id) is not None

    def test_delete_unknown(self, db_session, admin_user):
        with pytest.raises(NotFound):
            delete_user(db_session, 999, actor_id=admin_user.id)

    def test_ensure_admin_is_idempotent(self, db_session):
        first = ensure_admin_user(db_session, "admin", "ARSC2025")
        second = ensure_admin_user(db_session, "admin", "ARSC2025")

        assert first.id == second.id
        assert first.is_admin is True
        assert db_session.query(User).count() == 1

"""Unit tests for tally statistics."""
from types import SimpleNamespace

import pytest

from schoolvote.services.stats import compute_vote_stats, get_vote_stats
from tests.utils import make_candidate, make_partylist, make_position, make_user, make_vote


def _user(has_voted=False, is_admin=False, school_level="elementary"):
    return SimpleNamespace(has_voted=has_voted, is_admin=is_admin, school_level=school_level)


def _position(position_id, name):
    return SimpleNamespace(id=position_id, name=name)


def _candidate(candidate_id, position_id, name):
    return SimpleNamespace(id=candidate_id, position_id=position_id, name=name)


@pytest.mark.unit
class TestComputeVoteStats:
    """Test compute_vote_stats on plain inputs."""

    def test_no_users_gives_zero_participation(self):
        stats = compute_vote_stats([], [], [], [])

        assert stats["summary"] == {
            "total_students": 0,
            "voted_students": 0,
            "participation_rate": 0.0,
        }
        assert stats["votes_by_position"] == []
        assert [row["percentage"] for row in stats["votes_by_school_level"]] == [0.0, 0.0, 0.0]

    def test_participation_rate(self):
        users = [_user(has_voted=i < 4) for i in range(10)]

        stats = compute_vote_stats(users, [], [], [])

        assert stats["summary"]["total_students"] == 10
        assert stats["summary"]["voted_students"] == 4
        assert stats["summary"]["participation_rate"] == 40.0

    def test_admins_are_not_students(self):
        users = [_user(has_voted=True), _user(is_admin=True, school_level=None)]

        stats = compute_vote_stats(users, [], [], [])

        assert stats["summary"]["total_students"] == 1
        assert stats["summary"]["participation_rate"] == 100.0

    def test_school_level_breakdown_uses_level_headcount(self):
        users = [
            _user(has_voted=True, school_level="elementary"),
            _user(has_voted=False, school_level="elementary"),
            _user(has_voted=True, school_level="seniorHigh"),
            _user(has_voted=False, school_level=None),
        ]

        stats = compute_vote_stats(users, [], [], [])
        by_level = {row["school_level"]: row for row in stats["votes_by_school_level"]}

        assert list(by_level) == ["elementary", "juniorHigh", "seniorHigh"]
        assert by_level["elementary"]["total_students"] == 2
        assert by_level["elementary"]["percentage"] == 50.0
        assert by_level["juniorHigh"]["total_students"] == 0
        assert by_level["juniorHigh"]["percentage"] == 0.0
        assert by_level["seniorHigh"]["percentage"] == 100.0

    def test_candidate_percentages_use_total_students(self):
        users = [_user(has_voted=i < 3) for i in range(4)]
        positions = [_position(1, "President"), _position(2, "Secretary")]
        candidates = [
            _candidate(10, 1, "A"),
            _candidate(11, 1, "B"),
            _candidate(20, 2, "C"),
        ]
        vote_counts = [(1, 10, 2), (1, 11, 1)]

        stats = compute_vote_stats(users, positions, candidates, vote_counts)

        assert stats["votes_by_position"] == [
            {"position_id": 1, "position_name": "President", "votes": 3, "percentage": 75.0},
            {"position_id": 2, "position_name": "Secretary", "votes": 0, "percentage": 0.0},
        ]
        president, secretary = stats["votes_by_candidate_and_position"]
        assert [(c["candidate_name"], c["votes"], c["percentage"]) for c in president["candidates"]] == [
            ("A", 2, 50.0),
            ("B", 1, 25.0),
        ]
        assert secretary["candidates"] == [
            {"candidate_id": 20, "candidate_name": "C", "votes": 0, "percentage": 0.0},
        ]

    def test_percentages_are_not_rounded(self):
        users = [_user(has_voted=i == 0) for i in range(3)]

        stats = compute_vote_stats(users, [], [], [])

        assert stats["summary"]["participation_rate"] == pytest.approx(100 / 3)


@pytest.mark.unit
class TestGetVoteStats:
    """Test get_vote_stats against the database."""

    def test_report_reflects_votes(self, db_session):
        partylist = make_partylist(db_session)
        position = make_position(db_session, name="President")
        candidate = make_candidate(db_session, position, partylist, name="A")
        voter = make_user(db_session, name="Voter")
        make_user(db_session, name="Abstainer")
        make_user(db_session, name="Admin", is_admin=True, school_level=None, grade_level=None)
        make_vote(db_session, voter, candidate)

        stats = get_vote_stats(db_session)

        assert stats["summary"]["total_students"] == 2
        assert stats["summary"]["voted_students"] == 1
        assert stats["summary"]["participation_rate"] == 50.0
        assert stats["votes_by_position"][0]["votes"] == 1
        assert stats["votes_by_candidate_and_position"][0]["candidates"][0]["votes"] == 1

    def test_votes_sum_matches_position_total(self, db_session):
        partylist = make_partylist(db_session)
        position = make_position(db_session)
        a = make_candidate(db_session, position, partylist, name="A")
        b = make_candidate(db_session, position, partylist, name="B")
        for i in range(5):
            make_vote(db_session, make_user(db_session, name=f"V{i}"), a if i % 2 else b)

        stats = get_vote_stats(db_session)

        per_candidate = sum(c["votes"] for c in stats["votes_by_candidate_and_position"][0]["candidates"])
        assert per_candidate == stats["votes_by_position"][0]["votes"] == 5

    def test_candidate_percentage_ignores_position_eligibility(self, db_session):
        """4 votes out of 10 students is 40% even when only 5 could vote for the position."""
        partylist = make_partylist(db_session)
        position = make_position(db_session, school_levels=["elementary"])
        candidate = make_candidate(db_session, position, partylist, school_levels=["elementary"])
        eligible = [make_user(db_session, name=f"E{i}") for i in range(5)]
        for i in range(5):
            make_user(db_session, name=f"S{i}", school_level="seniorHigh", grade_level=11)
        for student in eligible[:4]:
            make_vote(db_session, student, candidate)

        stats = get_vote_stats(db_session)

        result = stats["votes_by_candidate_and_position"][0]["candidates"][0]
        assert result["votes"] == 4
        assert result["percentage"] == 40.0

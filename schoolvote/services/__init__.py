from .candidates import (
    create_candidate,
    delete_candidate,
    get_all_candidates,
    get_candidate,
    get_candidates_by_position,
    get_candidates_by_school_and_grade,
    update_candidate,
)
from .partylists import (
    create_partylist,
    delete_partylist,
    get_all_partylists,
    get_partylist,
    update_partylist,
)
from .positions import (
    create_position,
    delete_position,
    get_all_positions,
    get_position,
    update_position,
)
from .school_settings import get_school_settings, is_election_open, update_school_settings
from .stats import compute_vote_stats, get_vote_stats
from .users import (
    authenticate_user,
    create_user,
    create_users_bulk,
    delete_user,
    ensure_admin_user,
    get_all_users,
    get_user,
    get_user_by_reference_number,
    select_school_level,
    update_user,
)
from .vote import cast_vote, get_user_votes, get_vote_counts, reset_user_vote

__all__ = [
    # candidates
    "create_candidate",
    "delete_candidate",
    "get_all_candidates",
    "get_candidate",
    "get_candidates_by_position",
    "get_candidates_by_school_and_grade",
    "update_candidate",
    # partylists
    "create_partylist",
    "delete_partylist",
    "get_all_partylists",
    "get_partylist",
    "update_partylist",
    # positions
    "create_position",
    "delete_position",
    "get_all_positions",
    "get_position",
    "update_position",
    # school settings
    "get_school_settings",
    "is_election_open",
    "update_school_settings",
    # stats
    "compute_vote_stats",
    "get_vote_stats",
    # users
    "authenticate_user",
    "create_user",
    "create_users_bulk",
    "delete_user",
    "ensure_admin_user",
    "get_all_users",
    "get_user",
    "get_user_by_reference_number",
    "select_school_level",
    "update_user",
    # votes
    "cast_vote",
    "get_user_votes",
    "get_vote_counts",
    "reset_user_vote",
]

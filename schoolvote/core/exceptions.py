"""Election error taxonomy.

Services raise these; ``schoolvote.main`` renders them as
``{"detail": ..., "code": ...}`` with the class's HTTP status.
"""


class ElectionError(Exception):
    """Base class for all typed election failures."""

    status_code = 400
    default_message = "Request could not be processed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return type(self).__name__


class Unauthenticated(ElectionError):
    status_code = 401
    default_message = "Not authenticated"


class Unauthorized(ElectionError):
    status_code = 403
    default_message = "Unauthorized"


class NotFound(ElectionError):
    status_code = 404
    default_message = "Not found"


class Inconsistent(ElectionError):
    status_code = 400
    default_message = "Candidate is not for this position"


class NotEligible(ElectionError):
    status_code = 403
    default_message = "You are not eligible to vote for this candidate"


class ElectionClosed(ElectionError):
    status_code = 400
    default_message = "Voting is not open"


class AlreadyVoted(ElectionError):
    status_code = 409
    default_message = "You have already voted for this position"


class DuplicateKey(ElectionError):
    status_code = 409
    default_message = "User with this reference number already exists"


class ValidationError(ElectionError):
    status_code = 400
    default_message = "Invalid input"


class SelfDeletion(ValidationError):
    default_message = "Cannot delete your own account"

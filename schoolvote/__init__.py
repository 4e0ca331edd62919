"""SchoolVote: school election service."""

from app.domain.commit.schemas import CommitSuggestion, DiffSubmission
from app.domain.commit.service import generate_commit_suggestion

__all__ = [
    "CommitSuggestion",
    "DiffSubmission",
    "generate_commit_suggestion",
]

"""
Registration services for the Dev Center.

Following the three-call registration sequence:
1. Authenticate - obtain a bearer token
2. Branch - register the branch the run belongs to
3. Commit - register the commit against that branch
"""

from .flow import RegistrationFlow, RegistrationResult, RegistrationState
from .payloads import derive_branch_id, split_commit_message

__all__ = [
    "RegistrationFlow",
    "RegistrationResult",
    "RegistrationState",
    "derive_branch_id",
    "split_commit_message",
]

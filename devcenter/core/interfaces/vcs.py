"""
Source-control metadata provider interface.

Enables pluggable commit lookups (GitHub REST API, local git, test doubles)
following the Open/Closed Principle.
"""

from abc import ABC, abstractmethod

# Re-export models for convenience
from devcenter.core.models.commit import CommitInfo


class ICommitProvider(ABC):
    """
    Interface for fetching commit metadata from a source-control host.

    Implementations raise CommitLookupError on failure; its message is
    reported to the run unchanged.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Provider identifier.

        Examples: 'github'
        """
        pass

    @abstractmethod
    def get_commit(self, owner: str, repo: str, ref: str) -> CommitInfo:
        """
        Fetch metadata for a single commit.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name
            ref: Commit SHA, branch or tag

        Returns:
            CommitInfo with the commit message and committer email
        """
        pass


__all__ = ["CommitInfo", "ICommitProvider"]

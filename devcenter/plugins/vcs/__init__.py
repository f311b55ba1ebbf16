"""
Source-control provider plugins.

Provides commit metadata lookups for the registration flow.
"""

from .github import GitHubCommitProvider

__all__ = ["GitHubCommitProvider"]

from terragrade.clients.base import RateLimitedClient, TransportFailure
from terragrade.clients.github import GitHubClient
from terragrade.clients.openai import OpenAIClient
from terragrade.clients.scorecard import ScorecardClient

__all__ = [
    "RateLimitedClient",
    "TransportFailure",
    "GitHubClient",
    "OpenAIClient",
    "ScorecardClient",
]

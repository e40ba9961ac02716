"""pr-autoupdate resource clients."""

from autoupdate.clients.checks import ChecksClient
from autoupdate.clients.pulls import PullsClient
from autoupdate.clients.reviews import ReviewsClient

__all__ = [
    "PullsClient",
    "ReviewsClient",
    "ChecksClient",
]

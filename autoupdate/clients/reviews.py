"""Reviews resource client."""

from datetime import datetime
from typing import TYPE_CHECKING

from autoupdate.types.pulls import Review

if TYPE_CHECKING:
    from autoupdate.transport import HTTPTransport


class ReviewsClient:
    """Client for pull request review operations."""

    def __init__(self, transport: "HTTPTransport", owner: str, repo: str) -> None:
        """
        Initialize the reviews client.

        Args:
            transport: HTTP transport for making requests
            owner: Repository owner
            repo: Repository name
        """
        self.transport = transport
        self.repo_path = f"/repos/{owner}/{repo}"

    def list(self, pull_number: int) -> list[Review]:
        """
        List reviews for a pull request.

        Args:
            pull_number: The pull request number

        Returns:
            List of Review objects across all pages, oldest first

        Raises:
            NotFoundError: If pull request not found
        """
        reviews = self.transport.paginate(f"{self.repo_path}/pulls/{pull_number}/reviews")
        return [
            Review(
                review_id=review.get("id", 0),
                # deleted accounts come back with a null user
                reviewer=(review.get("user") or {}).get("login", "ghost"),
                state=review["state"],
                submitted_at=(
                    datetime.fromisoformat(review["submitted_at"].rstrip("Z"))
                    if review.get("submitted_at")
                    else None
                ),
            )
            for review in reviews
        ]

"""Pull requests resource client."""

from typing import TYPE_CHECKING, Any

from autoupdate.types.pulls import (
    MERGEABLE_STATE_UNKNOWN,
    PullRequest,
    UpdateBranchResult,
)

if TYPE_CHECKING:
    from autoupdate.transport import HTTPTransport


class PullsClient:
    """Client for pull request operations."""

    def __init__(self, transport: "HTTPTransport", owner: str, repo: str) -> None:
        """
        Initialize the pulls client.

        Args:
            transport: HTTP transport for making requests
            owner: Repository owner
            repo: Repository name
        """
        self.transport = transport
        self.repo_path = f"/repos/{owner}/{repo}"

    def list(
        self,
        base: str | None = None,
        state: str = "open",
        sort: str | None = None,
        direction: str | None = None,
    ) -> list[PullRequest]:
        """
        List pull requests.

        Args:
            base: Optional filter by base branch name
            state: "open", "closed" or "all" (default: "open")
            sort: Optional sort key ("created", "updated", "popularity", "long-running")
            direction: Optional sort direction ("asc", "desc")

        Returns:
            List of PullRequest objects in the order GitHub returns them
        """
        params: dict[str, Any] = {"state": state}
        if base:
            params["base"] = base
        if sort:
            params["sort"] = sort
        if direction:
            params["direction"] = direction

        pulls = self.transport.paginate(f"{self.repo_path}/pulls", params=params)
        return [self._parse_pull_request(pr) for pr in pulls]

    def get(self, pull_number: int) -> PullRequest:
        """
        Get pull request information.

        The first read of a PR whose mergeability is not yet known makes
        GitHub start computing it in the background; the response then
        carries ``mergeable_state == "unknown"``.

        Args:
            pull_number: The pull request number

        Returns:
            PullRequest with full details, including mergeable status

        Raises:
            NotFoundError: If pull request not found
        """
        data = self.transport.request(
            method="GET",
            path=f"{self.repo_path}/pulls/{pull_number}",
        )
        return self._parse_pull_request(data)

    def update_branch(self, pull_number: int) -> UpdateBranchResult:
        """
        Merge the base branch into the pull request branch.

        Args:
            pull_number: The pull request number

        Returns:
            UpdateBranchResult with GitHub's message

        Raises:
            ValidationError: If the branch cannot be updated (e.g. conflicts)
            NotFoundError: If pull request not found
        """
        data = self.transport.request(
            method="PUT",
            path=f"{self.repo_path}/pulls/{pull_number}/update-branch",
        )
        return UpdateBranchResult(
            message=data.get("message", ""),
            url=data.get("url", ""),
        )

    def _parse_pull_request(self, data: dict) -> PullRequest:
        """Parse pull request data from API response."""
        head = data.get("head") or {}
        base = data.get("base") or {}
        return PullRequest(
            number=data["number"],
            head_sha=head.get("sha", ""),
            title=data.get("title", ""),
            html_url=data.get("html_url", ""),
            head_ref=head.get("ref", ""),
            base_ref=base.get("ref", ""),
            labels=[label["name"] for label in data.get("labels") or []],
            auto_merge=bool(data.get("auto_merge")),
            draft=data.get("draft", False),
            mergeable=data.get("mergeable"),
            mergeable_state=data.get("mergeable_state") or MERGEABLE_STATE_UNKNOWN,
        )

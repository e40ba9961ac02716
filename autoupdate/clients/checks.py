"""Check runs resource client."""

from typing import TYPE_CHECKING

from autoupdate.types.checks import CheckRun

if TYPE_CHECKING:
    from autoupdate.transport import HTTPTransport


class ChecksClient:
    """Client for check run operations."""

    def __init__(self, transport: "HTTPTransport", owner: str, repo: str) -> None:
        self.transport = transport
        self.repo_path = f"/repos/{owner}/{repo}"

    def list_for_ref(self, ref: str) -> list[CheckRun]:
        """
        List check runs for a commit SHA, branch or tag.

        Args:
            ref: Git reference, usually the PR head SHA

        Returns:
            List of CheckRun objects across all pages
        """
        check_runs = self.transport.paginate(
            f"{self.repo_path}/commits/{ref}/check-runs", items_key="check_runs"
        )
        return [
            CheckRun(
                name=run.get("name", ""),
                status=run["status"],
                conclusion=run.get("conclusion"),
            )
            for run in check_runs
        ]

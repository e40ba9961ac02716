"""
Tests for the GitHub resource clients.

Feature: pr-autoupdate
"""

from datetime import datetime
from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from autoupdate.client import GitHubClient
from autoupdate.clients.pulls import PullsClient
from autoupdate.exceptions import ConfigurationError
from autoupdate.selection.approvals import ApprovalEvaluator
from autoupdate.selection.checks import CheckAggregator
from autoupdate.transport import HTTPTransport

OWNER = "adRise"
REPO = "actions"


def make_pr_payload(number: int = 1, **overrides: Any) -> dict[str, Any]:
    """A trimmed-down GET /pulls/{number} payload."""
    payload: dict[str, Any] = {
        "number": number,
        "title": "Amazing new feature",
        "html_url": f"https://github.com/{OWNER}/{REPO}/pull/{number}",
        "draft": False,
        "labels": [{"id": 208045946, "name": "bug"}, {"id": 208045947, "name": "autoupdate"}],
        "auto_merge": {"merge_method": "squash", "enabled_by": {"login": "octocat"}},
        "head": {"ref": "new-topic", "sha": "6dcb09b5b57875f334f61aebed695e2e4193db5e"},
        "base": {"ref": "main", "sha": "7fd1a60b01f91b314f59955a4e4d4e80d8edf11d"},
        "mergeable": True,
        "mergeable_state": "behind",
    }
    payload.update(overrides)
    return payload


def make_response(json_data: Any, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_data
    response.content = b"payload"
    response.headers = {}
    return response


def serve_pages(*pages: Any) -> Callable[..., MagicMock]:
    """Side effect that answers each request with the page named by its ``page`` param."""
    def serve(method: str, path: str, params: dict[str, Any] | None = None, json: Any = None) -> MagicMock:
        page = (params or {}).get("page", 1)
        return make_response(pages[page - 1] if page <= len(pages) else [])
    return serve


@pytest.fixture
def client() -> Generator[GitHubClient, None, None]:
    github = GitHubClient(token="test-token", owner=OWNER, repo=REPO)
    yield github
    github.close()


class TestPullsClient:
    def test_list_sends_expected_parameters(self, client: GitHubClient) -> None:
        response = make_response([make_pr_payload(1), make_pr_payload(2, auto_merge=None)])

        with patch.object(client.transport._client, "request", return_value=response) as request:
            pulls = client.pulls.list(base="main", sort="created", direction="asc")

        request.assert_called_once_with(
            "GET",
            f"/repos/{OWNER}/{REPO}/pulls",
            params={
                "state": "open",
                "base": "main",
                "sort": "created",
                "direction": "asc",
                "per_page": 100,
                "page": 1,
            },
            json=None,
        )
        assert [pr.number for pr in pulls] == [1, 2]
        assert pulls[0].auto_merge is True
        assert pulls[1].auto_merge is False

    def test_list_follows_every_page(self, client: GitHubClient) -> None:
        first_page = [make_pr_payload(n) for n in range(1, 101)]

        with patch.object(
            client.transport._client,
            "request",
            side_effect=serve_pages(first_page, [make_pr_payload(101)]),
        ) as request:
            pulls = client.pulls.list(base="main")

        assert [pr.number for pr in pulls] == list(range(1, 102))
        assert [call.kwargs["params"]["page"] for call in request.call_args_list] == [1, 2]

    def test_list_without_sort_omits_sort_parameters(self, client: GitHubClient) -> None:
        response = make_response([])

        with patch.object(client.transport._client, "request", return_value=response) as request:
            assert client.pulls.list(base="main") == []

        params = request.call_args.kwargs["params"]
        assert "sort" not in params
        assert "direction" not in params

    def test_get_parses_pull_request(self, client: GitHubClient) -> None:
        response = make_response(make_pr_payload(1347))

        with patch.object(client.transport._client, "request", return_value=response) as request:
            pr = client.pulls.get(1347)

        request.assert_called_once_with(
            "GET", f"/repos/{OWNER}/{REPO}/pulls/1347", params=None, json=None
        )
        assert pr.number == 1347
        assert pr.head_sha == "6dcb09b5b57875f334f61aebed695e2e4193db5e"
        assert pr.head_ref == "new-topic"
        assert pr.base_ref == "main"
        assert pr.labels == ["bug", "autoupdate"]
        assert pr.auto_merge is True
        assert pr.mergeable is True
        assert pr.mergeable_state == "behind"

    def test_get_keeps_unknown_mergeable_as_none(self, client: GitHubClient) -> None:
        response = make_response(make_pr_payload(1, mergeable=None, mergeable_state="unknown"))

        with patch.object(client.transport._client, "request", return_value=response):
            pr = client.pulls.get(1)

        assert pr.mergeable is None
        assert pr.mergeable_state == "unknown"

    def test_update_branch_sends_put(self, client: GitHubClient) -> None:
        response = make_response(
            {
                "message": "Updating pull request branch.",
                "url": f"https://github.com/repos/{OWNER}/{REPO}/pulls/53",
            },
            status_code=202,
        )

        with patch.object(client.transport._client, "request", return_value=response) as request:
            result = client.pulls.update_branch(53)

        request.assert_called_once_with(
            "PUT", f"/repos/{OWNER}/{REPO}/pulls/53/update-branch", params=None, json=None
        )
        assert result.message == "Updating pull request branch."
        assert result.url.endswith("/pulls/53")


class TestReviewsClient:
    def test_list_preserves_order_and_parses_fields(self, client: GitHubClient) -> None:
        response = make_response([
            {
                "id": 80,
                "user": {"login": "octocat"},
                "state": "APPROVED",
                "submitted_at": "2019-11-17T17:43:43Z",
            },
            {
                "id": 81,
                "user": None,
                "state": "COMMENTED",
                "submitted_at": None,
            },
        ])

        with patch.object(client.transport._client, "request", return_value=response) as request:
            reviews = client.reviews.list(12)

        assert request.call_args.args == ("GET", f"/repos/{OWNER}/{REPO}/pulls/12/reviews")
        assert [r.review_id for r in reviews] == [80, 81]
        assert reviews[0].reviewer == "octocat"
        assert reviews[0].state == "APPROVED"
        assert reviews[0].submitted_at == datetime(2019, 11, 17, 17, 43, 43)
        assert reviews[1].reviewer == "ghost"
        assert reviews[1].submitted_at is None

    def test_list_follows_every_page(self, client: GitHubClient) -> None:
        first_page = [
            {"id": i, "user": {"login": "bob"}, "state": "APPROVED", "submitted_at": None}
            for i in range(100)
        ]
        last_page = [
            {"id": 100, "user": {"login": "bob"}, "state": "CHANGES_REQUESTED", "submitted_at": None}
        ]

        with patch.object(
            client.transport._client, "request", side_effect=serve_pages(first_page, last_page)
        ) as request:
            status = ApprovalEvaluator(client, 1).evaluate(5)

        assert request.call_count == 2
        # bob's latest verdict sits on the second page
        assert status.changes_requested_count == 1
        assert status.approval_count == 0
        assert not status.is_approved


class TestChecksClient:
    def test_list_for_ref(self, client: GitHubClient) -> None:
        response = make_response({
            "total_count": 2,
            "check_runs": [
                {"id": 4, "name": "build", "status": "completed", "conclusion": "success"},
                {"id": 5, "name": "lint", "status": "in_progress", "conclusion": None},
            ],
        })

        with patch.object(client.transport._client, "request", return_value=response) as request:
            runs = client.checks.list_for_ref("fake_sha")

        assert request.call_args.args == (
            "GET", f"/repos/{OWNER}/{REPO}/commits/fake_sha/check-runs"
        )
        assert [(r.name, r.status, r.conclusion) for r in runs] == [
            ("build", "completed", "success"),
            ("lint", "in_progress", None),
        ]

    def test_list_for_ref_follows_every_page(self, client: GitHubClient) -> None:
        runs = [
            {"id": i, "name": f"job-{i}", "status": "completed", "conclusion": "success"}
            for i in range(100)
        ]
        runs.append({"id": 100, "name": "e2e", "status": "completed", "conclusion": "failure"})
        pages = [
            {"total_count": len(runs), "check_runs": runs[:100]},
            {"total_count": len(runs), "check_runs": runs[100:]},
        ]

        with patch.object(
            client.transport._client, "request", side_effect=serve_pages(*pages)
        ) as request:
            listed = client.checks.list_for_ref("fake_sha")
            passed = CheckAggregator(client).passed("fake_sha")

        assert len(listed) == 101
        assert listed[-1].conclusion == "failure"
        assert passed is False
        assert request.call_count == 4


label_strategy = st.text(
    min_size=1,
    max_size=30,
    alphabet=st.characters(whitelist_categories=("L", "N"), whitelist_characters="-_ "),
)


@given(labels=st.lists(label_strategy, max_size=10))
@settings(max_examples=50)
def test_labels_parsed_in_payload_order(labels: list[str]) -> None:
    """Every label name in the payload appears on the PullRequest, in order."""
    transport = MagicMock(spec=HTTPTransport)
    transport.request.return_value = make_pr_payload(
        1, labels=[{"name": name} for name in labels]
    )

    pr = PullsClient(transport, OWNER, REPO).get(1)

    assert pr.labels == labels


class TestFromEnv:
    def test_reads_actions_environment(self) -> None:
        client = GitHubClient.from_env({
            "INPUT_TOKEN": "input-token",
            "GITHUB_TOKEN": "fallback-token",
            "GITHUB_REPOSITORY": "octo/hello",
            "GITHUB_API_URL": "https://ghe.example.com/api/v3",
        })
        try:
            assert client.owner == "octo"
            assert client.repo == "hello"
            assert client.base_url == "https://ghe.example.com/api/v3"
            assert client.transport._client.headers["Authorization"] == "Bearer input-token"
        finally:
            client.close()

    def test_falls_back_to_github_token(self) -> None:
        with GitHubClient.from_env({
            "GITHUB_TOKEN": "fallback-token",
            "GITHUB_REPOSITORY": "octo/hello",
        }) as client:
            assert client.transport._client.headers["Authorization"] == "Bearer fallback-token"
            assert client.base_url == GitHubClient.DEFAULT_BASE_URL

    def test_missing_token(self) -> None:
        with pytest.raises(ConfigurationError, match="token"):
            GitHubClient.from_env({"GITHUB_REPOSITORY": "octo/hello"})

    @pytest.mark.parametrize("repository", ["", "octo", "octo/", "/hello"])
    def test_invalid_repository(self, repository: str) -> None:
        with pytest.raises(ConfigurationError):
            GitHubClient.from_env({"INPUT_TOKEN": "t", "GITHUB_REPOSITORY": repository})

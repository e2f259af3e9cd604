import json

import httpx
import pytest
import respx

from src.core.errors import UpstreamError
from src.core.models import DispatchTarget
from src.integrations.github.client import GitHubClient

API = "https://api.github.com"
REPO_URL = f"{API}/repos/acme/automation"
DISPATCH_URL = f"{API}/repos/acme/automation/actions/workflows/ci.yml/dispatches"


@pytest.fixture
def github_client() -> GitHubClient:
    return GitHubClient(token="test-token", base_url=API)


@pytest.fixture
def target() -> DispatchTarget:
    return DispatchTarget(owner="acme", repo="automation", workflow_filename="ci.yml", branch="main")


class TestGetDefaultBranch:
    @pytest.mark.asyncio
    @respx.mock
    async def test_returns_default_branch(self, github_client: GitHubClient) -> None:
        route = respx.get(REPO_URL).mock(
            return_value=httpx.Response(200, json={"full_name": "acme/automation", "default_branch": "trunk"})
        )

        branch = await github_client.get_default_branch("acme", "automation")

        assert branch == "trunk"
        request = route.calls.last.request
        assert request.headers["Authorization"] == "Bearer test-token"
        assert request.headers["Accept"] == "application/vnd.github+json"
        assert request.headers["X-GitHub-Api-Version"] == "2022-11-28"

    @pytest.mark.asyncio
    @respx.mock
    async def test_rejected_request(self, github_client: GitHubClient) -> None:
        respx.get(REPO_URL).mock(return_value=httpx.Response(404, text='{"message": "Not Found"}'))

        with pytest.raises(UpstreamError) as exc_info:
            await github_client.get_default_branch("acme", "automation")

        error = exc_info.value
        assert error.status_code == 500
        assert error.to_dict() == {
            "error": "Failed to fetch automation repository metadata",
            "status": 404,
            "details": '{"message": "Not Found"}',
        }

    @pytest.mark.asyncio
    @respx.mock
    async def test_missing_default_branch(self, github_client: GitHubClient) -> None:
        respx.get(REPO_URL).mock(return_value=httpx.Response(200, json={"full_name": "acme/automation"}))

        with pytest.raises(UpstreamError) as exc_info:
            await github_client.get_default_branch("acme", "automation")

        assert exc_info.value.error == "Could not determine default branch for automation repository"
        assert exc_info.value.details["repo_data"] == {"full_name": "acme/automation"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_failure(self, github_client: GitHubClient) -> None:
        respx.get(REPO_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(UpstreamError) as exc_info:
            await github_client.get_default_branch("acme", "automation")

        assert exc_info.value.error == "Failed to fetch automation repository metadata"
        assert exc_info.value.message == "connection refused"


class TestDispatchWorkflow:
    @pytest.mark.asyncio
    @respx.mock
    async def test_posts_ref_and_inputs(self, github_client: GitHubClient, target: DispatchTarget) -> None:
        route = respx.post(DISPATCH_URL).mock(return_value=httpx.Response(204))

        await github_client.dispatch_workflow(target, {"event_type": "push", "branch": "main"})

        request = route.calls.last.request
        assert json.loads(request.content) == {"ref": "main", "inputs": {"event_type": "push", "branch": "main"}}
        assert request.headers["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    @respx.mock
    async def test_identical_inputs_produce_identical_bodies(
        self, github_client: GitHubClient, target: DispatchTarget
    ) -> None:
        route = respx.post(DISPATCH_URL).mock(return_value=httpx.Response(204))
        inputs = {"event_type": "push", "timestamp": "2024-05-01T00:00:00.000Z", "branch": "main"}

        await github_client.dispatch_workflow(target, dict(inputs))
        await github_client.dispatch_workflow(target, dict(inputs))

        assert route.call_count == 2
        assert route.calls[0].request.content == route.calls[1].request.content

    @pytest.mark.asyncio
    @respx.mock
    async def test_rejection_with_json_body(self, github_client: GitHubClient, target: DispatchTarget) -> None:
        respx.post(DISPATCH_URL).mock(return_value=httpx.Response(422, json={"message": "Unexpected inputs"}))

        with pytest.raises(UpstreamError) as exc_info:
            await github_client.dispatch_workflow(target, {"branch": "main"})

        assert exc_info.value.to_dict() == {
            "error": "Failed to trigger workflow",
            "status": 422,
            "details": {"message": "Unexpected inputs"},
        }

    @pytest.mark.asyncio
    @respx.mock
    async def test_rejection_with_text_body(self, github_client: GitHubClient, target: DispatchTarget) -> None:
        respx.post(DISPATCH_URL).mock(return_value=httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(UpstreamError) as exc_info:
            await github_client.dispatch_workflow(target, {"branch": "main"})

        assert exc_info.value.details == {"status": 502, "details": "Bad Gateway"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_rejection_with_undecodable_body(
        self, github_client: GitHubClient, target: DispatchTarget
    ) -> None:
        respx.post(DISPATCH_URL).mock(
            return_value=httpx.Response(
                500, content=b"Bad \xe9 gateway", headers={"Content-Type": "text/plain; charset=utf-8"}
            )
        )

        with pytest.raises(UpstreamError) as exc_info:
            await github_client.dispatch_workflow(target, {"branch": "main"})

        assert exc_info.value.details == {"status": 500, "details": "Bad \ufffd gateway"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_failure(self, github_client: GitHubClient, target: DispatchTarget) -> None:
        respx.post(DISPATCH_URL).mock(side_effect=httpx.ConnectTimeout("timed out"))

        with pytest.raises(UpstreamError) as exc_info:
            await github_client.dispatch_workflow(target, {"branch": "main"})

        assert exc_info.value.to_dict() == {"error": "Network error", "message": "timed out"}

from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from src.core.constants import GITHUB_API_VERSION
from src.core.errors import UpstreamError
from src.core.models import DispatchInputs, DispatchTarget
from src.core.utils.logging import log_operation
from src.integrations.github.schemas import GitHubRepository, WorkflowDispatchRequest

logger = structlog.get_logger(__name__)


class GitHubClient:
    """
    REST client for the two calls the relay makes: reading the automation
    repository's metadata and dispatching one of its workflows.

    Each call opens its own connection and is attempted exactly once; the
    webhook sender is responsible for redelivery.
    """

    def __init__(self, token: str, base_url: str = "https://api.github.com"):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.headers = {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    async def get_default_branch(self, owner: str, repo: str) -> str:
        """
        Fetch the current default branch of a repository.

        Raises:
            UpstreamError: If the request fails, is rejected, or the response
                carries no default branch.
        """
        url = f"{self.base_url}/repos/{owner}/{repo}"
        async with log_operation("fetch_repository_metadata", repo=f"{owner}/{repo}"):
            async with httpx.AsyncClient(timeout=None) as client:
                try:
                    response = await client.get(url, headers=self.headers)
                except httpx.RequestError as e:
                    raise UpstreamError("Failed to fetch automation repository metadata", str(e)) from e

            if not response.is_success:
                logger.error("repository_metadata_rejected", status=response.status_code, body=response.text)
                raise UpstreamError(
                    "Failed to fetch automation repository metadata",
                    status=response.status_code,
                    details=response.text,
                )

            try:
                repo_data = response.json()
                repository = GitHubRepository.model_validate(repo_data)
            except (ValueError, ValidationError) as e:
                raise UpstreamError(
                    "Could not determine default branch for automation repository",
                    str(e),
                ) from e

            if not repository.default_branch:
                logger.error("default_branch_missing", repo_data=repo_data)
                raise UpstreamError(
                    "Could not determine default branch for automation repository",
                    repo_data=repo_data,
                )

        logger.info("default_branch_detected", repo=f"{owner}/{repo}", branch=repository.default_branch)
        return repository.default_branch

    async def dispatch_workflow(self, target: DispatchTarget, inputs: DispatchInputs) -> None:
        """
        Trigger a workflow_dispatch run of the target workflow.

        Raises:
            UpstreamError: On a network failure or a non-success response.
        """
        url = (
            f"{self.base_url}/repos/{target.owner}/{target.repo}"
            f"/actions/workflows/{target.workflow_filename}/dispatches"
        )
        body = WorkflowDispatchRequest(ref=target.branch, inputs=inputs).model_dump()

        async with log_operation(
            "workflow_dispatch",
            repo=target.automation_repo,
            workflow=target.workflow_filename,
            ref=target.branch,
        ):
            async with httpx.AsyncClient(timeout=None) as client:
                try:
                    response = await client.post(url, headers=self.headers, json=body)
                except httpx.RequestError as e:
                    raise UpstreamError("Network error", str(e)) from e

            if not response.is_success:
                details = self._error_details(response)
                logger.error("workflow_dispatch_rejected", status=response.status_code, details=details)
                raise UpstreamError("Failed to trigger workflow", status=response.status_code, details=details)

    @staticmethod
    def _error_details(response: httpx.Response) -> Any:
        """The error body as JSON when possible, else as text (decoded with replacement characters)."""
        try:
            return response.json()
        except ValueError:
            return response.text

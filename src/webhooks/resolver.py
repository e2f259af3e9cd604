import structlog

from src.core.config import GitHubConfig
from src.core.mapping import WorkflowMapping
from src.core.models import DispatchTarget
from src.integrations.github import GitHubClient

logger = structlog.get_logger()


class TargetResolver:
    """
    Resolves which automation workflow a source repository triggers and the
    branch it runs on.
    """

    def __init__(self, github_config: GitHubConfig, client: GitHubClient):
        self.github_config = github_config
        self.client = client

    async def resolve(self, repo_full_name: str) -> DispatchTarget:
        """
        Resolve the dispatch target for a source repository.

        The automation repository's default branch is read first, then the
        workflow mapping is parsed and the repository looked up in it.

        Raises:
            UpstreamError: If the default branch cannot be fetched.
            ConfigurationError: If the workflow mapping is missing or empty.
            NotConfiguredError: If the repository is not mapped.
        """
        owner = self.github_config.automation_repo_owner
        repo = self.github_config.automation_repo_name

        branch = await self.client.get_default_branch(owner, repo)

        mapping = WorkflowMapping.parse(self.github_config.workflow_mappings)
        workflow_filename = mapping.lookup(repo_full_name)

        logger.info("workflow_resolved", repo=repo_full_name, workflow=workflow_filename, branch=branch)
        return DispatchTarget(owner=owner, repo=repo, workflow_filename=workflow_filename, branch=branch)

"""
Repository to workflow mapping.

The mapping is configured as a single string of comma-separated
``owner/repo:workflow.yml`` pairs and parsed for every delivery.
"""

import structlog

from src.core.errors import ConfigurationError, NotConfiguredError

logger = structlog.get_logger()


class WorkflowMapping:
    """An ordered lookup from repository full name to workflow filename."""

    def __init__(self, pairs: dict[str, str]):
        self._pairs = dict(pairs)

    @classmethod
    def parse(cls, raw: str) -> "WorkflowMapping":
        """
        Parse a ``repo1:workflow1,repo2:workflow2`` string.

        Tokens missing either side are skipped. A repeated repository keeps its
        first position and its last workflow.

        Raises:
            ConfigurationError: If the string is empty or holds no valid pair.
        """
        if not raw:
            logger.error("missing_workflow_mappings")
            raise ConfigurationError("Server configuration error: missing workflow mappings")

        pairs: dict[str, str] = {}
        for token in raw.split(","):
            parts = token.split(":")
            repo = parts[0].strip()
            workflow = parts[1].strip() if len(parts) > 1 else ""
            if repo and workflow:
                pairs[repo] = workflow

        logger.info("workflow_mappings_parsed", repositories=list(pairs))

        if not pairs:
            logger.error("workflow_mappings_empty", raw=raw)
            raise ConfigurationError("Failed to load workflow mapping", "No valid mappings found")

        return cls(pairs)

    @property
    def repositories(self) -> list[str]:
        return list(self._pairs)

    def lookup(self, repo_full_name: str) -> str:
        """
        Return the workflow filename for a repository (exact match).

        Raises:
            NotConfiguredError: If the repository is not mapped.
        """
        workflow = self._pairs.get(repo_full_name) if repo_full_name else None
        if workflow is None:
            logger.error("repository_not_mapped", repo=repo_full_name)
            raise NotConfiguredError(repo_full_name, self.repositories)
        return workflow

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, repo_full_name: object) -> bool:
        return repo_full_name in self._pairs

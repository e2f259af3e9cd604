from pydantic import BaseModel, ConfigDict


class GitHubRepository(BaseModel):
    """Schema for the subset of the GitHub repository response the relay reads."""

    model_config = ConfigDict(extra="ignore")

    default_branch: str | None = None


class WorkflowDispatchRequest(BaseModel):
    """Body of a workflow_dispatch call."""

    ref: str
    inputs: dict[str, str]

"""
Application-wide constants.
"""

# workflow_dispatch accepts at most this many inputs
MAX_DISPATCH_INPUTS = 10

# Inputs kept, in order, when a dispatch carries too many
ESSENTIAL_INPUT_KEYS: tuple[str, ...] = (
    "event_type",
    "timestamp",
    "repository",
    "sender",
    "branch",
    "author",
    "commit_sha",
    "pr_number",
    "pr_title",
    "target_branch",
)

# Pull request actions that start a build
BUILD_TRIGGERING_PR_ACTIONS: frozenset[str] = frozenset({"opened", "reopened", "synchronize"})

BRANCH_REF_PREFIX = "refs/heads/"

GITHUB_API_VERSION = "2022-11-28"

PAYLOAD_EXCERPT_LENGTH = 1000
PARSE_ERROR_EXCERPT_LENGTH = 200

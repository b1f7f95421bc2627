from .webhook import (
    Commit,
    CommitAuthor,
    GitLabProject,
    GitLabUser,
    MergeRequestAttributes,
    MergeRequestEvent,
    PipelineAttributes,
    PipelineEvent,
)

__all__ = [
    "Commit",
    "CommitAuthor",
    "GitLabProject",
    "GitLabUser",
    "MergeRequestAttributes",
    "MergeRequestEvent",
    "PipelineAttributes",
    "PipelineEvent",
]

from pydantic import BaseModel, ConfigDict, model_validator


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        # GitLab sends null for unset values, they read as the field default
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class GitLabUser(_Payload):
    name: str = ""
    username: str = ""


class GitLabProject(_Payload):
    id: int = 0
    path_with_namespace: str = ""
    web_url: str = ""


class MergeRequestAttributes(_Payload):
    url: str = ""
    title: str = ""
    description: str = ""
    state: str = ""
    action: str = ""
    iid: int = 0


class MergeRequestEvent(_Payload):
    user: GitLabUser = GitLabUser()
    project: GitLabProject = GitLabProject()
    object_attributes: MergeRequestAttributes = MergeRequestAttributes()
    # GitLab reports the reviewers picked on the MR as assignees
    assignees: tuple[GitLabUser, ...] = ()


class PipelineAttributes(_Payload):
    id: int = 0
    status: str = ""
    ref: str = ""


class CommitAuthor(_Payload):
    name: str = ""
    email: str = ""


class Commit(_Payload):
    url: str = ""
    message: str = ""
    author: CommitAuthor = CommitAuthor()


class PipelineEvent(_Payload):
    project: GitLabProject = GitLabProject()
    object_attributes: PipelineAttributes = PipelineAttributes()
    commit: Commit = Commit()

from types import MappingProxyType
from typing import NamedTuple

from gitlab_notifier.models.webhook import GitLabUser, MergeRequestEvent, PipelineEvent


class StatusDisplay(NamedTuple):
    text: str
    color: str


# Only terminal statuses are announced; everything else (running, pending, ...) is ignored
PIPELINE_STATUS_DISPLAY = MappingProxyType({
    "success": StatusDisplay("成功🎉", "info"),
    "failed": StatusDisplay("失败🤔", "warning"),
})

EMPTY_DESCRIPTION = "无"


def format_user(user: GitLabUser) -> str:
    return f"{user.name}({user.username})"


def format_merge_request(event: MergeRequestEvent) -> str | None:
    """Build the notification for an opened or merged MR.

    Returns None for any other action.
    """
    project = event.project
    mr = event.object_attributes
    heading = f"### [{project.path_with_namespace}]({project.web_url})"
    mr_link = f"[!{mr.iid}]({mr.url})"
    view = f"> 操作: [[查看]({mr.url})]"

    if mr.action == "open":
        description = mr.description or EMPTY_DESCRIPTION
        reviewers = " ".join(format_user(reviewer) for reviewer in event.assignees)
        return "\n".join([
            f"{heading} 有新的合并请求 {mr_link}",
            f"> 标题: {mr.title}",
            f"> 描述: {description}",
            f"> 提交: {format_user(event.user)}",
            f"> 审核: {reviewers}",
            view,
        ])

    if mr.action == "merge":
        return "\n".join([
            f"{heading} 合并请求 {mr_link} 已合并",
            f"> 合并: {format_user(event.user)}",
            view,
        ])

    return None


def pipeline_url(event: PipelineEvent) -> str:
    return f"{event.project.web_url}/pipelines/{event.object_attributes.id}"


def format_pipeline(event: PipelineEvent) -> str | None:
    """Build the notification for a finished pipeline, None if the status is not announced."""
    display = PIPELINE_STATUS_DISPLAY.get(event.object_attributes.status)
    if display is None:
        return None

    commit = event.commit
    return "\n".join([
        f"仓库{event.project.path_with_namespace}的{event.object_attributes.ref}分支部署{display.text}",
        f'> <font color="{display.color}">{commit.message}</font>',
        f'> <font color="comment">{commit.author.email}</font>',
        f"> 点击进入 [git提交详情页面]({commit.url})",
        f"> 点击进入 [ci构建详情页面]({pipeline_url(event)})",
    ])

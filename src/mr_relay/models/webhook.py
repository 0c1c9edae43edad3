from enum import Enum
from typing import Any
from pydantic import Field
from .base import NullDefaultsModel


class MRAction(str, Enum):
    OPEN = "open"
    CLOSE = "close"
    REOPEN = "reopen"
    UPDATE = "update"
    APPROVED = "approved"
    UNAPPROVED = "unapproved"
    MERGE = "merge"


class GitLabModel(NullDefaultsModel):
    """Base for webhook payload parts."""


class GitLabUser(GitLabModel):
    id: int = 0
    name: str = ""
    username: str = ""
    avatar_url: str = ""
    email: str = ""


class GitLabProject(GitLabModel):
    id: int = 0
    name: str = ""
    description: str = ""
    web_url: str = ""
    avatar_url: Any = None
    git_ssh_url: str = ""
    git_http_url: str = ""
    namespace: str = ""
    visibility_level: int = 0
    path_with_namespace: str = ""
    default_branch: str = ""
    homepage: str = ""
    url: str = ""
    ssh_url: str = ""
    http_url: str = ""


class GitLabRepository(GitLabModel):
    name: str = ""
    url: str = ""
    description: str = ""
    homepage: str = ""


class GitLabCommitAuthor(GitLabModel):
    name: str = ""
    email: str = ""


class GitLabCommit(GitLabModel):
    id: str = ""
    message: str = ""
    timestamp: str = ""
    url: str = ""
    author: GitLabCommitAuthor = Field(default_factory=GitLabCommitAuthor)


class GitLabLabel(GitLabModel):
    id: int = 0
    title: str = ""
    color: str = ""
    project_id: int = 0
    created_at: str = ""
    updated_at: str = ""
    template: bool = False
    description: str = ""
    type: str = ""
    group_id: int = 0


class GitLabAssignee(GitLabModel):
    name: str = ""
    username: str = ""
    avatar_url: str = ""


class GitLabMergeRequest(GitLabModel):
    id: int = 0
    iid: int = 0
    target_branch: str = ""
    source_branch: str = ""
    source_project_id: int = 0
    target_project_id: int = 0
    author_id: int = 0
    assignee_id: int = 0
    title: str = ""
    description: str = ""
    created_at: str = ""
    updated_at: str = ""
    milestone_id: Any = None
    state: str = ""
    merge_status: str = ""
    source: GitLabProject = Field(default_factory=GitLabProject)
    target: GitLabProject = Field(default_factory=GitLabProject)
    last_commit: GitLabCommit = Field(default_factory=GitLabCommit)
    work_in_progress: bool = False
    url: str = ""
    action: str = ""
    assignee: GitLabAssignee = Field(default_factory=GitLabAssignee)


class GitLabMREvent(GitLabModel):
    """Merge request webhook body.

    See https://docs.gitlab.com/ee/user/project/integrations/webhooks.html#merge-request-events
    """
    object_kind: str = ""  # "merge_request"
    user: GitLabUser = Field(default_factory=GitLabUser)
    project: GitLabProject = Field(default_factory=GitLabProject)
    repository: GitLabRepository = Field(default_factory=GitLabRepository)
    object_attributes: GitLabMergeRequest = Field(default_factory=GitLabMergeRequest)
    labels: list[GitLabLabel] = Field(default_factory=list)
    changes: dict[str, Any] = Field(default_factory=dict)

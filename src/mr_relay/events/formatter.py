from mr_relay.models.webhook import GitLabMREvent


OPENED_TEMPLATE = """✨ {user} opened a new Merge Request: {title}
Project: {project}
Source branch: {source_branch}
Target branch: {target_branch}
Assignee: {assignee}
Description: {description}
URL: {url}
"""

APPROVED_TEMPLATE = """🍻 {user} approved Merge Request: {title}
Project: {project}
Source branch: {source_branch}
Target branch: {target_branch}
Assignee: {assignee}
URL: {url}
"""

MERGED_TEMPLATE = """🚀 {user} merged Merge Request: {title}
Project: {project}
Source branch: {source_branch}
Target branch: {target_branch}
Assignee: {assignee}
URL: {url}
"""


def _common_fields(event: GitLabMREvent) -> dict[str, str]:
    attrs = event.object_attributes
    return {
        "user": event.user.name,
        "title": attrs.title,
        "project": event.project.name,
        "source_branch": attrs.source_branch,
        "target_branch": attrs.target_branch,
        "assignee": attrs.assignee.name,
        "url": attrs.url,
    }


def format_opened(event: GitLabMREvent) -> str:
    return OPENED_TEMPLATE.format(
        description=event.object_attributes.description,
        **_common_fields(event),
    )


def format_approved(event: GitLabMREvent) -> str:
    return APPROVED_TEMPLATE.format(**_common_fields(event))


def format_merged(event: GitLabMREvent) -> str:
    return MERGED_TEMPLATE.format(**_common_fields(event))

# tests/conftest.py
import pytest


@pytest.fixture
def mr_payload():
    """Merge request webhook body as GitLab sends it."""
    return {
        "object_kind": "merge_request",
        "user": {
            "id": 1,
            "name": "Alice",
            "username": "alice",
            "avatar_url": "http://www.gravatar.com/avatar/alice",
            "email": "alice@example.com",
        },
        "project": {
            "id": 1,
            "name": "svc",
            "description": "Service",
            "web_url": "http://example.com/group/svc",
            "avatar_url": None,
            "namespace": "group",
            "visibility_level": 20,
            "path_with_namespace": "group/svc",
            "default_branch": "main",
        },
        "repository": {
            "name": "svc",
            "url": "git@example.com:group/svc.git",
            "description": "Service",
            "homepage": "http://example.com/group/svc",
        },
        "object_attributes": {
            "id": 99,
            "iid": 1,
            "target_branch": "main",
            "source_branch": "feat/x",
            "source_project_id": 1,
            "target_project_id": 1,
            "author_id": 1,
            "assignee_id": 2,
            "title": "Fix bug",
            "description": "desc",
            "created_at": "2013-12-03T17:23:34Z",
            "updated_at": "2013-12-03T17:23:34Z",
            "milestone_id": None,
            "state": "opened",
            "merge_status": "unchecked",
            "last_commit": {
                "id": "da1560886d4f094c3e6c9ef40349f7d38b5d27d7",
                "message": "fixed readme",
                "timestamp": "2012-01-03T23:36:29+02:00",
                "url": "http://example.com/group/svc/commits/da1560886d4f094c3e6c9ef40349f7d38b5d27d7",
                "author": {"name": "Alice", "email": "alice@example.com"},
            },
            "work_in_progress": False,
            "url": "http://x/1",
            "action": "open",
            "assignee": {
                "name": "Bob",
                "username": "bob",
                "avatar_url": "http://www.gravatar.com/avatar/bob",
            },
        },
        "labels": [
            {
                "id": 206,
                "title": "API",
                "color": "#ffffff",
                "project_id": 1,
                "created_at": "2013-12-03T17:15:43Z",
                "updated_at": "2013-12-03T17:15:43Z",
                "template": False,
                "description": "API related issues",
                "type": "ProjectLabel",
                "group_id": 41,
            }
        ],
        "changes": {
            "updated_by_id": {"previous": None, "current": 1},
        },
    }

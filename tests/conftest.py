"""공용 테스트 fixture."""

from typing import Any

import pytest


@pytest.fixture
def repo_payload() -> dict[str, Any]:
    """GitHub 저장소 API 응답 예시를 반환한다."""
    return {
        "id": 1296269,
        "node_id": "MDEwOlJlcG9zaXRvcnkxMjk2MjY5",
        "name": "Hello-World",
        "full_name": "octocat/Hello-World",
        "description": "This your first repo!",
        "html_url": "https://github.com/octocat/Hello-World",
        "created_at": "2011-01-26T19:01:12Z",
        "updated_at": "2011-01-26T19:14:43Z",
        "pushed_at": "2011-01-26T19:06:43Z",
        "language": "Python",
        "stargazers_count": 80,
        "forks_count": 9,
        "open_issues_count": 0,
        "default_branch": "master",
        "owner": {
            "login": "octocat",
            "id": 1,
            "avatar_url": "https://github.com/images/error/octocat_happy.gif",
            "html_url": "https://github.com/octocat",
        },
    }

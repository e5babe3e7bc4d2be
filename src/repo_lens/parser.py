"""저장소 입력 파싱 모듈."""

import re

from repo_lens.models import RepositoryIdentifier

GITHUB_URL_PATTERN = re.compile(r"github\.com/([^/]+)/([^/?#]+)")


def parse_repository_input(text: str) -> RepositoryIdentifier | None:
    """사용자 입력을 저장소 식별자로 변환한다.

    GitHub URL(`https://github.com/owner/repo`)과 `owner/repo` 형식을 받는다.
    이름 자체의 유효성은 검사하지 않으며, 잘못된 이름은 GitHub의 404로 드러난다.

    Args:
        text: 사용자 입력

    Returns:
        RepositoryIdentifier 또는 해석할 수 없으면 None
    """
    trimmed = text.strip()
    if not trimmed:
        return None

    match = GITHUB_URL_PATTERN.search(trimmed)
    if match:
        return RepositoryIdentifier(owner=match.group(1), repo=match.group(2))

    parts = [part for part in trimmed.split("/") if part]
    if len(parts) >= 2:
        return RepositoryIdentifier(owner=parts[0], repo=parts[1])

    return None

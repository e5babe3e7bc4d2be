"""백엔드 프로토콜 정의."""

from typing import Protocol

import httpx


class Backend(Protocol):
    """저장소 정보를 가져오는 실행 전략 프로토콜.

    응답을 해석하지 않고 그대로 돌려준다. 상태 코드 해석은 RepositoryClient가 맡는다.
    """

    async def get_repository(self, owner: str, repo: str) -> httpx.Response:
        """저장소 메타데이터 응답을 가져온다."""
        ...

    async def get_readme(self, owner: str, repo: str) -> httpx.Response:
        """README 원문 응답을 가져온다."""
        ...

"""저장소 조회 클라이언트 모듈."""

import logging
from datetime import datetime

import httpx

from repo_lens.age import calculate_age
from repo_lens.backends import Backend
from repo_lens.exceptions import FetchError, RepositoryNotFoundError
from repo_lens.models import RepositoryInfo, RepositoryMetadata

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """실패 응답에서 오류 메시지를 꺼낸다."""
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return f"Failed to fetch repository: {response.reason_phrase}"


class RepositoryClient:
    """백엔드를 통해 저장소 정보와 README를 가져온다."""

    def __init__(self, backend: Backend) -> None:
        """
        Args:
            backend: 실행 전략 (GitHubBackend 또는 ProxyBackend)
        """
        self.backend = backend

    async def fetch_repository_info(
        self,
        owner: str,
        repo: str,
        now: datetime | None = None,
    ) -> RepositoryInfo:
        """저장소 메타데이터를 가져오고 나이를 계산한다.

        네트워크 오류(httpx.RequestError)는 그대로 전파한다.

        Args:
            owner: 저장소 소유자
            repo: 저장소 이름
            now: 나이 계산 기준 시각. None이면 현재 시각.

        Raises:
            RepositoryNotFoundError: 404 응답
            FetchError: 그 밖의 실패 응답
        """
        response = await self.backend.get_repository(owner, repo)

        if response.status_code == 404:
            raise RepositoryNotFoundError(f"{owner}/{repo}")
        if not response.is_success:
            raise FetchError(_error_message(response), response.status_code)

        metadata = RepositoryMetadata.model_validate(response.json())
        return RepositoryInfo(
            repo=metadata,
            age=calculate_age(metadata.created_at, now),
        )

    async def fetch_readme(self, owner: str, repo: str) -> str | None:
        """README 원문을 가져온다.

        README는 부가 정보이므로 어떤 실패든 None으로 처리한다.
        """
        try:
            response = await self.backend.get_readme(owner, repo)
        except Exception as e:
            logger.warning(f"Failed to fetch README for {owner}/{repo}: {e}")
            return None

        if not response.is_success:
            logger.warning(
                f"README not available for {owner}/{repo}: {response.status_code}"
            )
            return None

        return response.text

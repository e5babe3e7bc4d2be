"""repo-lens 프록시 서버 경유 백엔드."""

import logging

import httpx

logger = logging.getLogger(__name__)


class ProxyBackend:
    """프록시 서버를 거쳐 GitHub API를 호출한다.

    토큰은 서버 측에서 붙이므로 이 백엔드는 자격 증명을 다루지 않는다.
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: 프록시 서버 주소 (예: http://localhost:8000)
            transport: httpx 전송 계층 (테스트용)
        """
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    async def _get(self, path: str) -> httpx.Response:
        url = f"{self.base_url}/api/github/repos{path}"
        logger.debug(f"GET {url}")

        async with httpx.AsyncClient(transport=self.transport) as client:
            return await client.get(url)

    async def get_repository(self, owner: str, repo: str) -> httpx.Response:
        """저장소 메타데이터를 요청한다."""
        return await self._get(f"/{owner}/{repo}")

    async def get_readme(self, owner: str, repo: str) -> httpx.Response:
        """README 원문을 요청한다."""
        return await self._get(f"/{owner}/{repo}/readme")

"""GitHub REST API 직접 호출 백엔드."""

import logging

import httpx

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/vnd.github.v3+json"
RAW_MEDIA_TYPE = "application/vnd.github.v3.raw"


class GitHubBackend:
    """GitHub API를 직접 호출한다. 토큰이 있으면 함께 보낸다."""

    BASE_URL = "https://api.github.com"

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            token: GitHub 액세스 토큰. None이면 비인증 요청.
            base_url: API 주소. None이면 api.github.com.
            transport: httpx 전송 계층 (테스트용)
        """
        self.token = token
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.transport = transport

    def _build_headers(self, accept: str) -> dict[str, str]:
        """요청 헤더를 생성한다."""
        headers = {"Accept": accept}
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    async def _get(self, path: str, accept: str) -> httpx.Response:
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url}")

        async with httpx.AsyncClient(transport=self.transport) as client:
            return await client.get(url, headers=self._build_headers(accept))

    async def get_repository(self, owner: str, repo: str) -> httpx.Response:
        """저장소 메타데이터를 요청한다."""
        return await self._get(f"/repos/{owner}/{repo}", JSON_MEDIA_TYPE)

    async def get_readme(self, owner: str, repo: str) -> httpx.Response:
        """README 원문을 요청한다."""
        return await self._get(f"/repos/{owner}/{repo}/readme", RAW_MEDIA_TYPE)

"""GitHub API 프록시 서버.

토큰을 서버 측에만 두고, 클라이언트 요청을 GitHub API로 전달한다.

    uvicorn repo_lens.server:app --port 8000
"""

import logging

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from repo_lens.backends import GitHubBackend
from repo_lens.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to fetch repository"


def _upstream_message(response: httpx.Response) -> str:
    """GitHub 오류 응답의 message를 꺼낸다."""
    try:
        data = response.json()
    except ValueError:
        return DEFAULT_ERROR_MESSAGE
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return DEFAULT_ERROR_MESSAGE


def create_app(
    settings: Settings | None = None,
    backend: GitHubBackend | None = None,
) -> FastAPI:
    """프록시 앱을 생성한다.

    Args:
        settings: 애플리케이션 설정. None이면 환경 설정 사용.
        backend: GitHub 백엔드. None이면 설정의 토큰으로 생성.
    """
    settings = settings or default_settings
    github = backend or GitHubBackend(
        token=settings.github_token,
        base_url=settings.github_api_url,
    )

    app = FastAPI(title="repo-lens proxy")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/api/github/repos/{owner}/{repo}")
    async def get_repository(owner: str, repo: str) -> Response:
        try:
            upstream = await github.get_repository(owner, repo)
        except httpx.RequestError as e:
            logger.error(f"Upstream request failed for {owner}/{repo}: {e}")
            return JSONResponse({"message": DEFAULT_ERROR_MESSAGE}, status_code=502)

        if not upstream.is_success:
            logger.info(f"Upstream {upstream.status_code} for {owner}/{repo}")
            return JSONResponse(
                {"message": _upstream_message(upstream)},
                status_code=upstream.status_code,
            )

        return Response(content=upstream.content, media_type="application/json")

    @app.get("/api/github/repos/{owner}/{repo}/readme")
    async def get_readme(owner: str, repo: str) -> Response:
        try:
            upstream = await github.get_readme(owner, repo)
        except httpx.RequestError as e:
            logger.error(f"Upstream README request failed for {owner}/{repo}: {e}")
            return PlainTextResponse("", status_code=502)

        if not upstream.is_success:
            return PlainTextResponse("", status_code=upstream.status_code)

        return Response(
            content=upstream.content,
            media_type=upstream.headers.get("content-type", "text/plain"),
        )

    return app


app = create_app()

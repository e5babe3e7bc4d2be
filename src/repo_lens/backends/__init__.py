"""실행 전략(백엔드) 모듈."""

from repo_lens.backends.base import Backend
from repo_lens.backends.github import GitHubBackend
from repo_lens.backends.proxy import ProxyBackend
from repo_lens.config import Settings


def create_backend(settings: Settings) -> Backend:
    """설정에 맞는 백엔드를 만든다.

    proxy_url이 있으면 프록시 모드, 없으면 GitHub API를 직접 호출한다.
    """
    if settings.proxy_url:
        return ProxyBackend(base_url=settings.proxy_url)
    return GitHubBackend(token=settings.github_token, base_url=settings.github_api_url)


__all__ = ["Backend", "GitHubBackend", "ProxyBackend", "create_backend"]

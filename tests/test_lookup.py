"""조회 흐름 테스트."""

import asyncio
from typing import Any

import httpx
import pytest

from repo_lens.client import RepositoryClient
from repo_lens.exceptions import InvalidRepositoryInputError, RepositoryNotFoundError
from repo_lens.lookup import RepositoryLookup


class _FakeBackend:
    """저장소별로 응답 시점을 제어할 수 있는 테스트용 백엔드."""

    def __init__(self, payload: dict[str, Any]) -> None:
        self.payload = payload
        self.gates: dict[str, asyncio.Event] = {}
        self.calls: list[str] = []

    def gate(self, repo: str) -> asyncio.Event:
        return self.gates.setdefault(repo, asyncio.Event())

    async def get_repository(self, owner: str, repo: str) -> httpx.Response:
        self.calls.append(f"{owner}/{repo}")
        if repo in self.gates:
            await self.gates[repo].wait()
        if repo == "missing":
            return httpx.Response(404, json={"message": "Not Found"})
        return httpx.Response(200, json={**self.payload, "name": repo})

    async def get_readme(self, owner: str, repo: str) -> httpx.Response:
        return httpx.Response(200, text=f"# {repo}")


@pytest.fixture
def backend(repo_payload: dict[str, Any]) -> _FakeBackend:
    """테스트용 백엔드를 반환한다."""
    return _FakeBackend(repo_payload)


@pytest.fixture
def lookup(backend: _FakeBackend) -> RepositoryLookup:
    """RepositoryLookup 인스턴스를 반환한다."""
    return RepositoryLookup(RepositoryClient(backend))


class TestRepositoryLookup:
    """RepositoryLookup 테스트."""

    @pytest.mark.asyncio
    async def test_lookup_returns_info_and_readme(
        self, lookup: RepositoryLookup
    ) -> None:
        """메타데이터와 README를 함께 반환한다."""
        result = await lookup.lookup("https://github.com/octocat/Hello-World")

        assert result is not None
        assert result.identifier.full_name == "octocat/Hello-World"
        assert result.info.repo.name == "Hello-World"
        assert result.readme == "# Hello-World"

    @pytest.mark.asyncio
    async def test_invalid_input_does_not_fetch(
        self, lookup: RepositoryLookup, backend: _FakeBackend
    ) -> None:
        """해석할 수 없는 입력은 요청 없이 실패한다."""
        with pytest.raises(InvalidRepositoryInputError):
            await lookup.lookup("not-a-repo")
        assert backend.calls == []

    @pytest.mark.asyncio
    async def test_not_found_propagates(self, lookup: RepositoryLookup) -> None:
        """최신 조회의 오류는 그대로 전파한다."""
        with pytest.raises(RepositoryNotFoundError):
            await lookup.lookup("octocat/missing")

    @pytest.mark.asyncio
    async def test_last_request_wins(
        self, lookup: RepositoryLookup, backend: _FakeBackend
    ) -> None:
        """먼저 시작한 조회가 늦게 끝나면 그 결과는 버린다."""
        slow_gate = backend.gate("slow")

        slow = asyncio.create_task(lookup.lookup("octocat/slow"))
        await asyncio.sleep(0)
        fast = await lookup.lookup("octocat/fast")

        slow_gate.set()
        assert await slow is None
        assert fast is not None
        assert fast.info.repo.name == "fast"

    @pytest.mark.asyncio
    async def test_stale_error_is_suppressed(
        self, lookup: RepositoryLookup, backend: _FakeBackend
    ) -> None:
        """밀려난 조회의 오류는 전파하지 않는다."""
        missing_gate = backend.gate("missing")

        stale = asyncio.create_task(lookup.lookup("octocat/missing"))
        await asyncio.sleep(0)
        latest = await lookup.lookup("octocat/Hello-World")

        missing_gate.set()
        assert await stale is None
        assert latest is not None

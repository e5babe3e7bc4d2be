"""저장소 조회 흐름 모듈."""

import asyncio
import logging

from repo_lens.client import RepositoryClient
from repo_lens.exceptions import InvalidRepositoryInputError
from repo_lens.models import LookupResult
from repo_lens.parser import parse_repository_input

logger = logging.getLogger(__name__)


class RepositoryLookup:
    """입력 파싱부터 메타데이터/README 조회까지 한 번에 수행한다.

    조회가 겹치면 마지막 요청만 결과를 받는다. 진행 중인 요청을 취소하지는 않고,
    더 새로운 조회가 시작된 뒤 끝난 결과는 버린다.
    """

    def __init__(self, client: RepositoryClient) -> None:
        """
        Args:
            client: 저장소 조회 클라이언트
        """
        self.client = client
        self._generation = 0

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def lookup(self, text: str) -> LookupResult | None:
        """입력에 해당하는 저장소를 조회한다.

        Args:
            text: 저장소 이름 또는 URL

        Returns:
            LookupResult. 더 새로운 조회에 밀린 경우 None.

        Raises:
            InvalidRepositoryInputError: 입력을 해석할 수 없음
            RepositoryNotFoundError: 저장소가 없음
            FetchError: 그 밖의 실패 응답
        """
        identifier = parse_repository_input(text)
        if identifier is None:
            raise InvalidRepositoryInputError(text)

        self._generation += 1
        generation = self._generation

        try:
            info, readme = await asyncio.gather(
                self.client.fetch_repository_info(identifier.owner, identifier.repo),
                self.client.fetch_readme(identifier.owner, identifier.repo),
            )
        except Exception:
            if not self._is_current(generation):
                logger.debug(f"Discarding failed stale lookup: {identifier.full_name}")
                return None
            raise

        if not self._is_current(generation):
            logger.debug(f"Discarding stale lookup: {identifier.full_name}")
            return None

        return LookupResult(identifier=identifier, info=info, readme=readme)

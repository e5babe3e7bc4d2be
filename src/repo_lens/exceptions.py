"""예외 정의."""


class RepoLensError(Exception):
    """repo-lens 기본 예외."""


class RepositoryNotFoundError(RepoLensError):
    """저장소를 찾을 수 없다 (GitHub 404)."""

    def __init__(self, full_name: str) -> None:
        super().__init__(f"Repository not found: {full_name}")
        self.full_name = full_name


class FetchError(RepoLensError):
    """404 이외의 실패 응답."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidRepositoryInputError(RepoLensError, ValueError):
    """입력을 저장소 식별자로 해석할 수 없다."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid repository input: {text!r}")
        self.text = text

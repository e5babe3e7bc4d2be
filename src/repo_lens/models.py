"""데이터 모델 정의."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RepositoryIdentifier(BaseModel):
    """저장소 식별자 (owner, repo)."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(min_length=1, description="저장소 소유자")
    repo: str = Field(min_length=1, description="저장소 이름")

    @field_validator("owner", "repo")
    @classmethod
    def _reject_slash(cls, value: str) -> str:
        if "/" in value:
            raise ValueError("must not contain '/'")
        return value

    @property
    def full_name(self) -> str:
        """owner/repo 형식의 이름."""
        return f"{self.owner}/{self.repo}"


class RepositoryOwner(BaseModel):
    """저장소 소유자 요약."""

    model_config = ConfigDict(frozen=True)

    login: str = Field(description="소유자 로그인")
    avatar_url: str = Field(description="아바타 이미지 URL")
    html_url: str = Field(description="프로필 URL")


class RepositoryMetadata(BaseModel):
    """조회 시점의 GitHub 저장소 정보.

    필드 이름은 GitHub API 응답 키와 같다.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(description="저장소 ID")
    name: str = Field(description="저장소 이름")
    full_name: str = Field(description="저장소 전체 이름 (owner/repo)")
    description: str | None = Field(default=None, description="저장소 설명")
    html_url: str = Field(description="저장소 URL")
    created_at: datetime = Field(description="생성 시각")
    updated_at: datetime = Field(description="마지막 수정 시각")
    # 빈 저장소는 pushed_at이 null이다
    pushed_at: datetime | None = Field(default=None, description="마지막 push 시각")
    language: str | None = Field(default=None, description="주 프로그래밍 언어")
    stargazers_count: int = Field(default=0, description="스타 수")
    forks_count: int = Field(default=0, description="포크 수")
    open_issues_count: int = Field(default=0, description="열린 이슈 수")
    default_branch: str = Field(description="기본 브랜치")
    owner: RepositoryOwner = Field(description="소유자 정보")


class AgeBreakdown(BaseModel):
    """생성 후 경과 기간 (고정 길이 달력 단위 근사치)."""

    model_config = ConfigDict(frozen=True)

    years: int = Field(description="연 (365일 단위)")
    months: int = Field(description="월 (30일 단위)")
    days: int = Field(description="일")
    total_days: int = Field(description="총 경과 일수")


class RepositoryInfo(BaseModel):
    """저장소 정보와 경과 기간."""

    model_config = ConfigDict(frozen=True)

    repo: RepositoryMetadata
    age: AgeBreakdown


class LookupResult(BaseModel):
    """한 번의 조회 결과."""

    model_config = ConfigDict(frozen=True)

    identifier: RepositoryIdentifier
    info: RepositoryInfo
    readme: str | None = Field(default=None, description="README 원문")

"""설정 관리 모듈."""

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정.

    프로세스 시작 시 한 번 로드되며 이후 변경되지 않는다.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # GitHub
    github_token: str | None = Field(
        default=None,
        description="GitHub 액세스 토큰. 없으면 비인증 요청",
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        description="GitHub REST API 주소",
    )

    # 프록시
    proxy_url: str | None = Field(
        default=None,
        description="repo-lens 프록시 서버 주소. 설정되면 프록시 모드로 동작",
    )
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default=["*"],
        description="허용할 CORS origin 목록 (쉼표 구분)",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> object:
        """쉼표로 구분된 문자열을 목록으로 바꾼다."""
        if isinstance(value, str):
            return [o.strip() for o in value.split(",") if o.strip()]
        return value


settings = Settings()

"""GitHub 저장소 조회 도구."""

__version__ = "0.1.0"

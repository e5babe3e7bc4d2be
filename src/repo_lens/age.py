"""저장소 나이 계산 모듈."""

import math
from datetime import UTC, datetime, timedelta

from repo_lens.models import AgeBreakdown

ONE_DAY = timedelta(days=1)
DAYS_PER_YEAR = 365
DAYS_PER_MONTH = 30


def calculate_age(created_at: datetime, now: datetime | None = None) -> AgeBreakdown:
    """생성 시각으로부터 경과 기간을 계산한다.

    윤년이나 월별 일수를 고려하지 않고 1년=365일, 1개월=30일로 근사한다.

    Args:
        created_at: 저장소 생성 시각 (timezone 포함)
        now: 기준 시각. None이면 현재 시각.
    """
    if now is None:
        now = datetime.now(UTC)

    total_days = (now - created_at) // ONE_DAY

    # 나머지는 부호를 유지한다 (미래 시각이면 모든 항목이 음수)
    return AgeBreakdown(
        years=total_days // DAYS_PER_YEAR,
        months=int(math.fmod(total_days, DAYS_PER_YEAR)) // DAYS_PER_MONTH,
        days=int(math.fmod(total_days, DAYS_PER_MONTH)),
        total_days=total_days,
    )


def _pluralize(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_age(age: AgeBreakdown) -> str:
    """경과 기간을 읽기 쉬운 문자열로 만든다 (예: '1 year, 1 month, 10 days')."""
    parts = []
    if age.years > 0:
        parts.append(_pluralize(age.years, "year"))
    if age.months > 0:
        parts.append(_pluralize(age.months, "month"))
    if age.days > 0 or not parts:
        parts.append(_pluralize(age.days, "day"))
    return ", ".join(parts)

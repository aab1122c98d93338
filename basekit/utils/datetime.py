"""
날짜/시간 처리 유틸리티

UTC 기준 현재 시간(교체 가능한 시계 포함), 시간 표현 간 변환, 포맷/파싱 함수들을 제공합니다.
모든 변환 함수는 None 입력에 대해 None을 반환합니다.
"""

import re
from contextlib import contextmanager
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Iterator, Optional, Protocol, Union

import pytz

from ..core.logging import get_logger

logger = get_logger(__name__)

# 기본 시간대 (프로세스 전체에서 UTC 고정)
DEFAULT_TIMEZONE = timezone.utc

# strftime 포맷에서 시간 부분을 시작하는 지시자
_TIME_DIRECTIVE = re.compile(r"%[HIMSfpXcTRz]")


class Clock(Protocol):
    """현재 시간 공급자"""

    def now(self) -> datetime:
        ...


class SystemClock:
    """시스템 UTC 시계"""

    def now(self) -> datetime:
        return datetime.now(DEFAULT_TIMEZONE)


class FixedClock:
    """고정 시각을 반환하는 시계 (테스트용)"""

    def __init__(self, instant: datetime):
        self.instant = to_utc(instant)

    def now(self) -> datetime:
        return self.instant

    def advance(self, **delta: float) -> None:
        """timedelta 인자만큼 시계를 진행합니다."""
        self.instant = self.instant + timedelta(**delta)


# 전역 시계 오버라이드 (테스트 전용, 단일 스레드 사용 가정)
_clock: Optional[Clock] = None


def set_clock(clock: Optional[Clock]) -> None:
    """현재 시간 계산에 사용할 시계를 설정합니다. None이면 시스템 시계로 복귀합니다."""
    global _clock
    _clock = clock


def reset_clock() -> None:
    set_clock(None)


def get_clock() -> Optional[Clock]:
    return _clock


@contextmanager
def use_clock(clock: Clock) -> Iterator[Clock]:
    """
    블록 안에서만 시계를 교체하고 빠져나올 때 이전 시계를 복원합니다.

    Args:
        clock: 사용할 시계

    Yields:
        Clock: 설정된 시계
    """
    previous = _clock
    set_clock(clock)
    try:
        yield clock
    finally:
        set_clock(previous)


def now(clock: Optional[Clock] = None) -> datetime:
    """
    현재 UTC 시간을 반환합니다.

    명시적으로 전달된 시계가 우선하고, 그 다음 전역 오버라이드, 마지막으로 시스템 시계를 사용합니다.

    Args:
        clock: 사용할 시계 (선택사항)

    Returns:
        datetime: UTC 시간대의 현재 시간
    """
    source = clock or _clock
    if source is None:
        return datetime.now(DEFAULT_TIMEZONE)
    return to_utc(source.now())


def utc_now() -> datetime:
    """
    시계 오버라이드와 무관하게 실제 현재 UTC 시간을 반환합니다.

    Returns:
        datetime: UTC 시간대의 현재 시간
    """
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """
    datetime 객체를 UTC로 변환합니다.

    Args:
        dt: 변환할 datetime 객체

    Returns:
        datetime: UTC로 변환된 datetime 객체
    """
    if dt.tzinfo is None:
        # naive datetime은 UTC로 가정
        return dt.replace(tzinfo=timezone.utc)
    else:
        return dt.astimezone(timezone.utc)


def is_in_past(dt: datetime, clock: Optional[Clock] = None) -> bool:
    """
    주어진 시간이 현재 시간보다 이전인지 확인합니다.

    Args:
        dt: 확인할 시간 (naive인 경우 UTC로 가정)
        clock: 현재 시간 계산에 사용할 시계 (선택사항)

    Returns:
        bool: 현재보다 엄격하게 이전인 경우 True
    """
    return to_utc(dt) < now(clock)


def datetime_to_millis(dt: Optional[datetime]) -> Optional[int]:
    """
    datetime을 epoch 밀리초(단일 시점 표현)로 변환합니다.

    Args:
        dt: 변환할 datetime (naive인 경우 UTC로 가정)

    Returns:
        Optional[int]: epoch 밀리초 (밀리초 미만은 버림)
    """
    if dt is None:
        return None
    delta = to_utc(dt) - datetime(1970, 1, 1, tzinfo=timezone.utc)
    return delta // timedelta(milliseconds=1)


def millis_to_datetime(millis: Optional[int]) -> Optional[datetime]:
    """
    epoch 밀리초를 UTC datetime으로 변환합니다.

    Args:
        millis: epoch 밀리초

    Returns:
        Optional[datetime]: UTC 시간대의 datetime
    """
    if millis is None:
        return None
    return datetime(1970, 1, 1, tzinfo=DEFAULT_TIMEZONE) + timedelta(milliseconds=millis)


def datetime_to_timestamp(dt: Optional[datetime]) -> Optional[float]:
    """
    datetime 객체를 Unix 타임스탬프로 변환합니다.

    Args:
        dt: 변환할 datetime 객체

    Returns:
        Optional[float]: Unix 타임스탬프
    """
    if dt is None:
        return None
    return to_utc(dt).timestamp()


def timestamp_to_datetime(timestamp: Optional[Union[int, float]]) -> Optional[datetime]:
    """
    Unix 타임스탬프를 datetime 객체로 변환합니다.

    Args:
        timestamp: Unix 타임스탬프

    Returns:
        Optional[datetime]: UTC 시간대의 datetime 객체
    """
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def _calendar_zone(dt: datetime) -> tzinfo:
    zone = getattr(dt.tzinfo, "key", None) or getattr(dt.tzinfo, "zone", None)
    if zone:
        return pytz.timezone(zone)
    return pytz.FixedOffset(dt.utcoffset() // timedelta(minutes=1))


def to_calendar(dt: Optional[datetime], tz: Optional[Union[str, tzinfo]] = None) -> Optional[datetime]:
    """
    datetime을 pytz 시간대가 붙은 달력 값으로 변환합니다.

    Args:
        dt: 변환할 datetime (naive인 경우 UTC로 가정)
        tz: 대상 시간대 (None인 경우 dt의 시간대 이름, 이름이 없으면 같은 고정 오프셋)

    Returns:
        Optional[datetime]: pytz 시간대로 지역화된 datetime
    """
    if dt is None:
        return None

    dt = to_utc(dt) if dt.tzinfo is None else dt
    if tz is None:
        tz = _calendar_zone(dt)
    elif isinstance(tz, str):
        tz = pytz.timezone(tz)

    return dt.astimezone(tz)


def from_calendar(calendar_value: Optional[datetime]) -> Optional[datetime]:
    """
    달력 값을 해당 오프셋의 고정 시간대 datetime으로 변환합니다.

    반환값은 같은 시점을 나타내지만 시간대 식별자는 원래 지역 시간대와 다를 수 있습니다.

    Args:
        calendar_value: 시간대가 있는 달력 값

    Returns:
        Optional[datetime]: 고정 오프셋 시간대의 datetime
    """
    if calendar_value is None:
        return None

    offset = calendar_value.utcoffset()
    if offset is None:
        return calendar_value.replace(tzinfo=DEFAULT_TIMEZONE)
    return calendar_value.astimezone(timezone(offset))


def to_local_date(dt: Optional[datetime]) -> Optional[date]:
    """
    datetime(또는 달력 값)의 자체 시간대 기준 날짜를 반환합니다.

    Args:
        dt: datetime 또는 달력 값

    Returns:
        Optional[date]: 날짜
    """
    if dt is None:
        return None
    return dt.date()


def from_local_date(local_date: Optional[date]) -> Optional[datetime]:
    """
    날짜를 UTC 자정의 datetime으로 변환합니다.

    Args:
        local_date: 날짜

    Returns:
        Optional[datetime]: 해당 날짜 00:00 UTC
    """
    if local_date is None:
        return None
    return datetime.combine(local_date, time.min, tzinfo=DEFAULT_TIMEZONE)


def format_datetime(dt: Optional[datetime], format_str: Optional[str] = None) -> Optional[str]:
    """
    datetime 객체를 문자열로 포맷합니다.

    Args:
        dt: 포맷할 datetime 객체
        format_str: 포맷 문자열 (None인 경우 ISO 형식 사용)

    Returns:
        Optional[str]: 포맷된 날짜/시간 문자열 (dt가 None인 경우 None)
    """
    if dt is None:
        return None
    if format_str is None:
        return dt.isoformat()
    return dt.strftime(format_str)


def _date_part(pattern: str) -> Optional[str]:
    match = _TIME_DIRECTIVE.search(pattern)
    if match is None:
        return None
    return pattern[:match.start()].rstrip(" T'")


def parse_local(value: Optional[str], pattern: str) -> Optional[datetime]:
    """
    문자열을 시간대 없는 datetime으로 파싱합니다.

    날짜/시간 패턴으로 먼저 시도하고, 실패하면 패턴의 날짜 부분만으로 파싱해 자정을 붙입니다.

    Args:
        value: 파싱할 문자열
        pattern: strptime 포맷

    Returns:
        Optional[datetime]: 파싱된 datetime (실패한 경우 None)
    """
    if value is None:
        return None

    try:
        return datetime.strptime(value, pattern)
    except ValueError:
        pass

    date_pattern = _date_part(pattern)
    if not date_pattern:
        return None

    try:
        return datetime.combine(datetime.strptime(value, date_pattern).date(), time.min)
    except ValueError:
        return None


def parse_date(value: Optional[str], pattern: str, default: Optional[datetime] = None) -> Optional[datetime]:
    """
    문자열을 UTC datetime으로 파싱합니다.

    Args:
        value: 파싱할 문자열
        pattern: strptime 포맷
        default: 파싱 실패 시 반환할 값

    Returns:
        Optional[datetime]: UTC 시간대의 datetime 또는 default
    """
    parsed = parse_local(value, pattern)
    if parsed is None:
        logger.debug("Date parsing failed", value=value, pattern=pattern)
        return default
    return parsed.replace(tzinfo=DEFAULT_TIMEZONE)


def parse_local_date(value: Optional[str], pattern: str) -> Optional[date]:
    """
    문자열을 날짜로 파싱합니다. 시간 부분은 사용하지 않습니다.

    Args:
        value: 파싱할 문자열
        pattern: strptime 날짜 포맷

    Returns:
        Optional[date]: 파싱된 날짜 (실패한 경우 None)
    """
    if value is None:
        return None
    try:
        return datetime.strptime(value, pattern).date()
    except ValueError:
        return None

"""
날짜/시간 유틸리티 단위 테스트
"""

import pytest
from datetime import date, datetime, timedelta, timezone
from unittest.mock import patch

import pytz
from freezegun import freeze_time

from basekit.utils import datetime as dt_utils
from basekit.utils.datetime import (
    DEFAULT_TIMEZONE,
    FixedClock,
    SystemClock,
    now,
    utc_now,
    set_clock,
    reset_clock,
    get_clock,
    use_clock,
    to_utc,
    is_in_past,
    datetime_to_millis,
    millis_to_datetime,
    datetime_to_timestamp,
    timestamp_to_datetime,
    to_calendar,
    from_calendar,
    to_local_date,
    from_local_date,
    format_datetime,
    parse_local,
    parse_date,
    parse_local_date
)


@pytest.fixture(autouse=True)
def _reset_clock():
    yield
    reset_clock()


class TestNow:
    """현재 시간 테스트"""

    @freeze_time("2024-01-15 12:30:45")
    def test_now_is_utc(self):
        """시스템 시계 UTC 시간 테스트"""
        result = now()

        assert result.tzinfo == timezone.utc
        assert result == datetime(2024, 1, 15, 12, 30, 45, tzinfo=timezone.utc)

    @freeze_time("2024-01-15 12:30:45")
    def test_system_clock(self):
        assert SystemClock().now() == datetime(2024, 1, 15, 12, 30, 45, tzinfo=timezone.utc)

    def test_explicit_clock(self):
        """명시적 시계 사용 테스트"""
        clock = FixedClock(datetime(2020, 5, 1, 10, 0))

        assert now(clock) == datetime(2020, 5, 1, 10, 0, tzinfo=timezone.utc)

    def test_clock_override(self):
        """전역 시계 오버라이드 테스트"""
        clock = FixedClock(datetime(2020, 5, 1, tzinfo=timezone.utc))
        set_clock(clock)

        assert get_clock() is clock
        assert now() == datetime(2020, 5, 1, tzinfo=timezone.utc)

        reset_clock()
        assert get_clock() is None
        assert now().year >= 2024

    def test_explicit_clock_beats_override(self):
        """명시적 시계가 전역 오버라이드보다 우선"""
        set_clock(FixedClock(datetime(2000, 1, 1)))
        explicit = FixedClock(datetime(2010, 1, 1))

        assert now(explicit).year == 2010

    def test_use_clock_restores_previous(self):
        """컨텍스트 매니저 종료 시 이전 시계 복원"""
        outer = FixedClock(datetime(2000, 1, 1))
        set_clock(outer)

        with use_clock(FixedClock(datetime(2010, 1, 1))):
            assert now().year == 2010

        assert get_clock() is outer

    def test_clock_time_normalised_to_utc(self):
        """시계 값은 UTC로 정규화"""
        moscow = pytz.timezone("Europe/Moscow").localize(datetime(2021, 6, 1, 15, 0))
        assert now(FixedClock(moscow)) == datetime(2021, 6, 1, 12, 0, tzinfo=timezone.utc)
        assert now(FixedClock(moscow)).tzinfo == timezone.utc

    def test_fixed_clock_advance(self):
        clock = FixedClock(datetime(2020, 1, 1))
        clock.advance(minutes=5)
        assert now(clock) == datetime(2020, 1, 1, 0, 5, tzinfo=timezone.utc)

    def test_utc_now_ignores_override(self):
        """utc_now는 오버라이드와 무관"""
        set_clock(FixedClock(datetime(2000, 1, 1)))
        assert utc_now().year > 2000


class TestIsInPast:
    """과거 시간 여부 테스트"""

    def test_is_in_past(self):
        clock = FixedClock(datetime(2020, 1, 1, 12, 0))

        assert is_in_past(datetime(2020, 1, 1, 11, 59), clock) is True
        assert is_in_past(datetime(2020, 1, 1, 12, 1), clock) is False

    def test_now_is_not_in_past(self):
        """현재 시각은 과거가 아님 (엄격한 비교)"""
        clock = FixedClock(datetime(2020, 1, 1, 12, 0))
        assert is_in_past(datetime(2020, 1, 1, 12, 0), clock) is False

    def test_uses_override(self):
        with use_clock(FixedClock(datetime(2020, 1, 1))):
            assert is_in_past(datetime(2019, 12, 31)) is True


class TestConversions:
    """시간 표현 간 변환 테스트"""

    def test_to_utc(self):
        """naive/aware 변환 테스트"""
        naive = datetime(2024, 1, 1, 9, 0)
        assert to_utc(naive) == datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

        kst = datetime(2024, 1, 1, 9, 0, tzinfo=timezone(timedelta(hours=9)))
        assert to_utc(kst) == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)

    def test_millis_round_trip(self):
        """밀리초 정밀도 왕복 변환"""
        value = datetime(2024, 3, 10, 8, 15, 30, 123000, tzinfo=timezone.utc)

        millis = datetime_to_millis(value)

        assert isinstance(millis, int)
        assert millis_to_datetime(millis) == value

    def test_millis_truncates_micros(self):
        value = datetime(1970, 1, 1, 0, 0, 0, 1999, tzinfo=timezone.utc)
        assert datetime_to_millis(value) == 1

    def test_millis_epoch(self):
        assert millis_to_datetime(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert datetime_to_millis(datetime(1970, 1, 1)) == 0

    def test_timestamp_conversions(self):
        """Unix 타임스탬프 변환 테스트"""
        value = datetime(2024, 1, 15, 12, 30, 45, tzinfo=timezone.utc)

        assert timestamp_to_datetime(datetime_to_timestamp(value)) == value

    def test_calendar_round_trip_same_instant(self):
        """달력 왕복 변환: 시점은 같고 시간대 식별자는 다를 수 있음"""
        zone = pytz.timezone("Asia/Yekaterinburg")
        original = zone.localize(datetime(2023, 7, 1, 10, 0))

        restored = from_calendar(to_calendar(original))

        assert restored == original
        assert restored.utcoffset() == timedelta(hours=5)
        assert restored.tzinfo != original.tzinfo

    def test_to_calendar_target_zone(self):
        """대상 시간대 지정 테스트"""
        value = datetime(2023, 1, 1, 0, 0, tzinfo=timezone.utc)

        calendar = to_calendar(value, "Europe/Moscow")

        assert calendar.hour == 3
        assert calendar.tzinfo.zone == "Europe/Moscow"

    def test_to_calendar_keeps_fixed_offset(self):
        value = datetime(2023, 1, 1, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert to_calendar(value).utcoffset() == timedelta(hours=2)

    def test_local_date(self):
        """날짜 변환 테스트"""
        value = datetime(2024, 2, 29, 23, 0, tzinfo=timezone.utc)

        assert to_local_date(value) == date(2024, 2, 29)
        assert to_local_date(to_calendar(value, "Asia/Seoul")) == date(2024, 3, 1)

    def test_from_local_date(self):
        """UTC 자정 변환 테스트"""
        assert from_local_date(date(2024, 2, 29)) == datetime(2024, 2, 29, tzinfo=timezone.utc)

    @pytest.mark.parametrize("func", [
        datetime_to_millis,
        millis_to_datetime,
        datetime_to_timestamp,
        timestamp_to_datetime,
        to_calendar,
        from_calendar,
        to_local_date,
        from_local_date,
    ])
    def test_none_input(self, func):
        """None 입력은 None 반환"""
        assert func(None) is None


class TestFormatAndParse:
    """포맷/파싱 테스트"""

    def test_format_default_iso(self):
        value = datetime(2024, 1, 15, 12, 30, 45, tzinfo=timezone.utc)
        assert format_datetime(value) == "2024-01-15T12:30:45+00:00"

    def test_format_custom(self):
        value = datetime(2024, 1, 15, 12, 30, 45)
        assert format_datetime(value, "%d.%m.%Y %H:%M") == "15.01.2024 12:30"

    def test_format_none(self):
        assert format_datetime(None, "%Y") is None

    def test_parse_local(self):
        """날짜/시간 패턴 파싱"""
        assert parse_local("2024-01-15 12:30", "%Y-%m-%d %H:%M") == datetime(2024, 1, 15, 12, 30)

    def test_parse_local_date_only_value(self):
        """시간 부분이 없으면 자정으로 보완"""
        assert parse_local("2024-01-15", "%Y-%m-%d %H:%M") == datetime(2024, 1, 15, 0, 0)

    def test_parse_local_failure(self):
        assert parse_local("garbage", "%Y-%m-%d %H:%M") is None
        assert parse_local(None, "%Y-%m-%d") is None

    def test_parse_date_utc(self):
        """UTC 기준 파싱"""
        result = parse_date("15.01.2024 10:00", "%d.%m.%Y %H:%M")

        assert result == datetime(2024, 1, 15, 10, 0, tzinfo=DEFAULT_TIMEZONE)

    @patch.object(dt_utils, "logger")
    def test_parse_date_default(self, mock_logger):
        """파싱 실패 시 기본값 반환"""
        fallback = datetime(2000, 1, 1, tzinfo=timezone.utc)

        assert parse_date("nope", "%Y-%m-%d", fallback) is fallback
        assert parse_date("nope", "%Y-%m-%d") is None
        assert mock_logger.debug.called

    def test_parse_local_date(self):
        assert parse_local_date("2024-12-31", "%Y-%m-%d") == date(2024, 12, 31)
        assert parse_local_date("31/12", "%Y-%m-%d") is None
        assert parse_local_date(None, "%Y-%m-%d") is None

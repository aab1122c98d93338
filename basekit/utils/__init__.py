"""
공통 유틸리티 모듈

이 패키지는 프로젝트 전반에서 사용되는 공통 유틸리티 함수들을 제공합니다.
"""

from .collections import (
    list_of, to_list, set_of, to_set, concat, first, filter_items, safe_add, add,
    to_map, group_to_map, contains, extract, get_empty_keys, null_safe,
    safe_equals, is_empty, not_empty, run_ignored
)
from .datetime import (
    DEFAULT_TIMEZONE, FixedClock, SystemClock, now, utc_now, set_clock, reset_clock,
    use_clock, is_in_past, datetime_to_millis, millis_to_datetime, to_calendar,
    from_calendar, to_local_date, from_local_date, format_datetime, parse_local,
    parse_date, parse_local_date
)
from .decimals import d, scale, div, parse_number, total
from .formatting import format_amount
from .text import (
    DEFAULT_CHARSET, to_bytes, from_bytes, utf8_bytes, utf8_str, b64_encode,
    b64_decode, truncate, fill_template, null_safe_str
)
from .hash import digest, sha256
from .parsing import XPathResult, regexp_groups, regexp, xpath, parse_enum
from .wait import sleep, wait_condition
from .resources import read_as_bytes, read_as_string
from .uri import get_base_url, get_uri, has_host
from .model import extract_property, enum_to_str, clone_object
from .id_generator import guid, is_valid_uuid

__all__ = [
    # 컬렉션
    "list_of",
    "to_list",
    "set_of",
    "to_set",
    "concat",
    "first",
    "filter_items",
    "safe_add",
    "add",
    "to_map",
    "group_to_map",
    "contains",
    "extract",
    "get_empty_keys",
    "null_safe",
    "safe_equals",
    "is_empty",
    "not_empty",
    "run_ignored",

    # 날짜/시간
    "DEFAULT_TIMEZONE",
    "FixedClock",
    "SystemClock",
    "now",
    "utc_now",
    "set_clock",
    "reset_clock",
    "use_clock",
    "is_in_past",
    "datetime_to_millis",
    "millis_to_datetime",
    "to_calendar",
    "from_calendar",
    "to_local_date",
    "from_local_date",
    "format_datetime",
    "parse_local",
    "parse_date",
    "parse_local_date",

    # 숫자
    "d",
    "scale",
    "div",
    "parse_number",
    "total",
    "format_amount",

    # 문자열/인코딩
    "DEFAULT_CHARSET",
    "to_bytes",
    "from_bytes",
    "utf8_bytes",
    "utf8_str",
    "b64_encode",
    "b64_decode",
    "truncate",
    "fill_template",
    "null_safe_str",

    # 해싱
    "digest",
    "sha256",

    # 파싱
    "XPathResult",
    "regexp_groups",
    "regexp",
    "xpath",
    "parse_enum",

    # 대기
    "sleep",
    "wait_condition",

    # 리소스/URI
    "read_as_bytes",
    "read_as_string",
    "get_base_url",
    "get_uri",
    "has_host",

    # 모델
    "extract_property",
    "enum_to_str",
    "clone_object",

    # ID 생성
    "guid",
    "is_valid_uuid",
]

"""
문자열/인코딩 유틸리티

UTF-8 바이트 변환, Base64, 문자열 자르기, 템플릿 채우기 함수들을 제공합니다.
"""

import base64
import codecs
import re
from typing import Any, Mapping, Optional, Union

from ..core.exceptions import EncodingError

# 기본 인코딩
DEFAULT_CHARSET = "utf-8"

_PLACEHOLDER = re.compile(r"\$\{([^}]*)\}")


def _check_encoding(encoding: str) -> None:
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise EncodingError(f"Unsupported encoding: {encoding}", cause=e) from e


def to_bytes(s: str, encoding: str = DEFAULT_CHARSET) -> bytes:
    """
    문자열을 지정한 인코딩의 바이트로 변환합니다.

    Raises:
        EncodingError: 지원하지 않는 인코딩인 경우
    """
    _check_encoding(encoding)
    return s.encode(encoding)


def from_bytes(b: bytes, encoding: str = DEFAULT_CHARSET) -> str:
    """
    바이트를 지정한 인코딩의 문자열로 변환합니다.

    Raises:
        EncodingError: 지원하지 않는 인코딩인 경우
    """
    _check_encoding(encoding)
    return b.decode(encoding)


def utf8_bytes(s: str) -> bytes:
    return to_bytes(s, DEFAULT_CHARSET)


def utf8_str(b: bytes) -> str:
    return from_bytes(b, DEFAULT_CHARSET)


def b64_encode(data: Union[str, bytes]) -> str:
    """
    Base64로 인코딩합니다. 문자열은 UTF-8 바이트로 변환한 뒤 인코딩합니다.

    Args:
        data: 원본 문자열 또는 바이트

    Returns:
        str: Base64 문자열
    """
    if isinstance(data, str):
        data = utf8_bytes(data)
    return base64.b64encode(data).decode("ascii")


def b64_decode(text: Union[str, bytes]) -> bytes:
    """
    Base64 문자열을 디코딩합니다.

    Raises:
        binascii.Error: 올바른 Base64가 아닌 경우
    """
    return base64.b64decode(text, validate=True)


def truncate(s: Optional[str], length: int) -> Optional[str]:
    """
    문자열을 최대 length 글자로 자릅니다.

    Args:
        s: 원본 문자열
        length: 최대 길이 (문자열보다 길어도 오류 없음)

    Returns:
        Optional[str]: 잘린 문자열 (None인 경우 None)
    """
    if s is None:
        return None
    return s[:max(length, 0)]


def fill_template(template: str, values: Mapping[str, Any]) -> str:
    """
    ${name} 자리표시자를 값으로 채운 뒤 작은따옴표를 큰따옴표로 바꿉니다.

    코드 안에 XML/JSON 리터럴을 작은따옴표로 적을 때 사용합니다.
    매핑에 없는 자리표시자는 빈 문자열로 치환됩니다.

    Args:
        template: 템플릿 문자열
        values: 이름 -> 값 매핑

    Returns:
        str: 완성된 문자열
    """
    filled = _PLACEHOLDER.sub(lambda m: null_safe_str(values.get(m.group(1))), template)
    return filled.replace("'", '"')


def null_safe_str(obj: Any) -> str:
    """None이면 빈 문자열, 아니면 str(obj)"""
    return "" if obj is None else str(obj)

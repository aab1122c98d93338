"""
ID 생성 유틸리티

UUID 기반 고유 ID를 생성하고 검증하는 함수들을 제공합니다.
"""

import uuid


def guid() -> str:
    """
    표준 UUID4를 생성합니다.

    Returns:
        str: 36자리 UUID4 문자열 (하이픈 포함)
    """
    return str(uuid.uuid4())


def is_valid_uuid(value: str) -> bool:
    """
    유효한 UUID인지 검증합니다.

    Args:
        value: 검증할 문자열

    Returns:
        bool: 유효한 UUID인 경우 True
    """
    try:
        uuid.UUID(value)
        return True
    except (ValueError, TypeError, AttributeError):
        return False

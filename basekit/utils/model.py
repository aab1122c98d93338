"""
모델 유틸리티

모델 트리에서 null 검사를 포함한 속성 추출, 열거형 이름 변환, 객체 복제 함수들을 제공합니다.
"""

import copy
from enum import Enum
from typing import Callable, Iterable, List, Optional, TypeVar

from .collections import null_safe

T = TypeVar('T')
V = TypeVar('V')
R = TypeVar('R')


def extract_property(
    model: Optional[T],
    extractor: Callable[[T], Optional[V]],
    callback: Callable[[V], R]
) -> Optional[R]:
    """
    모델에서 값을 꺼내 변환합니다. 중간 값이 None이면 None을 반환합니다.

    Args:
        model: 원본 모델
        extractor: 모델 -> 값 추출 함수
        callback: 값 -> 결과 변환 함수

    Returns:
        Optional[R]: 변환 결과 (모델 또는 추출 값이 None인 경우 None)
    """
    return null_safe(model, lambda m: null_safe(extractor(m), callback))


def enum_to_str(items: Iterable[Enum]) -> List[str]:
    """열거형 멤버들의 이름 목록"""
    return [item.name for item in items]


def clone_object(obj: Optional[T]) -> Optional[T]:
    """
    가능하면 객체의 복사본을 반환하고, 복사할 수 없으면 같은 객체를 반환합니다.

    Args:
        obj: 원본 객체

    Returns:
        Optional[T]: 얕은 복사본 또는 원본 (None인 경우 None)
    """
    if obj is None:
        return None
    try:
        return copy.copy(obj)
    except (TypeError, copy.Error):
        return obj

"""
컬렉션 유틸리티

리스트/세트 생성, 필터링, 맵 변환, 포함 여부 검사 등 null-safe 컬렉션 함수들을 제공합니다.
모든 생성 함수는 입력을 공유하지 않는 새 컨테이너를 반환합니다.
"""

import collections.abc as abc
from typing import (
    Any, Callable, Dict, Iterable, List, Mapping, MutableSequence, MutableSet,
    Optional, Sequence, Set, TypeVar, Union
)

from ..core.logging import get_logger

T = TypeVar('T')
K = TypeVar('K')
V = TypeVar('V')
R = TypeVar('R')

logger = get_logger(__name__)


def list_of(*items: T) -> List[T]:
    """
    가변 인자로 새 리스트를 생성합니다.

    Args:
        *items: 리스트에 담을 요소들

    Returns:
        List[T]: 새 리스트
    """
    return list(items)


def to_list(iterable: Optional[Iterable[T]]) -> List[T]:
    """
    컬렉션/이터레이터로 새 리스트를 생성합니다.

    Args:
        iterable: 원본 컬렉션 (None인 경우 빈 컬렉션으로 취급)

    Returns:
        List[T]: 원본과 독립적인 새 리스트
    """
    if iterable is None:
        return []
    return list(iterable)


def set_of(*items: T) -> Set[T]:
    """가변 인자로 새 세트를 생성합니다."""
    return set(items)


def to_set(iterable: Optional[Iterable[T]]) -> Set[T]:
    """컬렉션/이터레이터로 새 세트를 생성합니다. None은 빈 세트가 됩니다."""
    if iterable is None:
        return set()
    return set(iterable)


def concat(first_items: Optional[Sequence[T]], *items: T) -> List[T]:
    """
    시퀀스 뒤에 요소들을 이어 붙인 새 리스트를 반환합니다.

    Args:
        first_items: 앞쪽 시퀀스 (None 허용)
        *items: 뒤에 붙일 요소들

    Returns:
        List[T]: 연결된 새 리스트
    """
    return to_list(first_items) + list(items)


def first(iterable: Optional[Iterable[T]]) -> Optional[T]:
    """
    컬렉션의 첫 번째 요소를 반환합니다.

    Args:
        iterable: 컬렉션, 세트 또는 이터레이터

    Returns:
        Optional[T]: 첫 번째 요소 (None 또는 빈 컬렉션인 경우 None)
    """
    if iterable is None:
        return None
    return next(iter(iterable), None)


def filter_items(iterable: Optional[Iterable[T]], predicate: Callable[[T], bool]) -> Optional[List[T]]:
    """
    조건을 만족하는 요소만 원래 순서대로 담은 새 리스트를 반환합니다.

    Args:
        iterable: 원본 컬렉션
        predicate: 필터 조건

    Returns:
        Optional[List[T]]: 필터링된 리스트 (원본이 None인 경우 None)
    """
    if iterable is None:
        return None
    return [item for item in iterable if predicate(item)]


def safe_add(coll: Union[MutableSequence[T], MutableSet[T]], item: Optional[T]):
    """None이 아닌 경우에만 요소를 추가하고 컬렉션을 그대로 반환합니다."""
    add(coll, item)
    return coll


def add(coll: Union[MutableSequence[T], MutableSet[T]], item: Optional[T]) -> bool:
    """
    None이 아닌 경우에만 요소를 추가합니다.

    Args:
        coll: 대상 컬렉션 (리스트 또는 세트)
        item: 추가할 요소

    Returns:
        bool: 추가된 경우 True
    """
    if item is None:
        return False

    if isinstance(coll, abc.MutableSet):
        coll.add(item)
    else:
        coll.append(item)
    return True


def to_map(*args: Any) -> Dict[Any, Any]:
    """
    연속된 인자를 (키, 값) 쌍으로 묶어 삽입 순서가 유지되는 딕셔너리를 만듭니다.

    인자 개수가 홀수이면 마지막 키의 값은 None이 됩니다. None 키도 허용됩니다.

    Args:
        *args: key1, value1, key2, value2, ...

    Returns:
        Dict[Any, Any]: 생성된 딕셔너리
    """
    result: Dict[Any, Any] = {}
    for i in range(0, len(args), 2):
        value = args[i + 1] if i + 1 < len(args) else None
        result[args[i]] = value
    return result


def group_to_map(
    iterable: Optional[Iterable[T]],
    key_func: Callable[[T], K],
    value_func: Callable[[T], V],
    merge_func: Optional[Callable[[V, V], V]] = None
) -> Dict[K, V]:
    """
    컬렉션을 키/값 함수로 딕셔너리로 변환합니다.

    Args:
        iterable: 원본 컬렉션 (None인 경우 빈 딕셔너리)
        key_func: 키 추출 함수
        value_func: 값 추출 함수
        merge_func: 키 충돌 시 (기존 값, 새 값)을 병합하는 함수 (없으면 마지막 값 사용)

    Returns:
        Dict[K, V]: 변환된 딕셔너리
    """
    result: Dict[K, V] = {}
    for item in to_list(iterable):
        key = key_func(item)
        value = value_func(item)
        if merge_func is not None and key in result:
            value = merge_func(result[key], value)
        result[key] = value
    return result


def contains(coll: Iterable[T], all_: bool, *items: T) -> bool:
    """
    컬렉션이 주어진 요소들을 포함하는지 확인합니다.

    Args:
        coll: 검사 대상 컬렉션
        all_: True이면 모든 요소 포함(논리곱), False이면 하나 이상 포함(논리합)
        *items: 찾을 요소들

    Returns:
        bool: 조건 만족 여부 (요소가 없으면 논리곱은 True, 논리합은 False)
    """
    source = to_list(coll)
    if all_:
        return all(item in source for item in items)
    return any(item in source for item in items)


def extract(iterable: Optional[Iterable[T]], key_func: Callable[[T], K]) -> Optional[Set[K]]:
    """컬렉션의 각 요소에서 키를 추출해 세트로 반환합니다. 원본이 None이면 None."""
    if iterable is None:
        return None
    return {key_func(item) for item in iterable}


def get_empty_keys(mapping: Mapping[K, Any], keys: Iterable[K]) -> Set[K]:
    """값이 없거나 None인 키들을 반환합니다."""
    return {key for key in keys if mapping.get(key) is None}


def null_safe(value: Optional[T], callback: Callable[[T], R]) -> Optional[R]:
    """값이 None이 아닐 때만 콜백을 적용합니다."""
    return None if value is None else callback(value)


def safe_equals(a: Any, b: Any) -> bool:
    """None을 허용하는 동등 비교"""
    if a is None or b is None:
        return a is b
    return a == b


def is_empty(value: Any) -> bool:
    """None, 빈 문자열, 빈 컬렉션/매핑이면 True"""
    if value is None:
        return True
    if isinstance(value, abc.Sized):
        return len(value) == 0
    return False


def not_empty(value: Any) -> bool:
    return not is_empty(value)


def run_ignored(callback: Callable[..., Any], *params: Any) -> None:
    """
    콜백을 실행하고 발생한 예외는 에러 로그만 남기고 무시합니다.

    Args:
        callback: 실행할 콜백
        *params: 콜백 인자
    """
    try:
        callback(*params)
    except Exception as e:
        logger.error("Ignored error", error_type=type(e).__name__, error_message=str(e))

"""
리플렉션 유틸리티 (테스트 전용)

클래스 계층 어디에 선언되었든(이름 맹글링된 private 멤버 포함) 필드를 읽고/쓰거나
메서드를 호출합니다. 비즈니스 로직에서 사용하지 마세요.
"""

import inspect
from typing import Any, Iterator, Optional

from ..core.exceptions import MemberNotFoundError


def _mro(target: Any) -> tuple:
    # 클래스 객체 자체가 대상이면 그 클래스의 계층을 사용
    return target.__mro__ if isinstance(target, type) else type(target).__mro__


def _candidate_names(target: Any, name: str) -> Iterator[str]:
    yield name

    bare = name.lstrip("_")
    if not bare or name.endswith("__"):
        return

    yield f"_{bare}"
    for klass in _mro(target):
        yield f"_{klass.__name__.lstrip('_')}__{bare}"


def _is_declared(target: Any, attr: str) -> bool:
    if attr in getattr(target, "__dict__", {}):
        return True

    for klass in _mro(target):
        if attr in vars(klass) or attr in inspect.get_annotations(klass):
            return True
    return False


def _resolve(target: Any, name: str) -> Optional[str]:
    for attr in _candidate_names(target, name):
        if _is_declared(target, attr):
            return attr
    return None


def inject(target: Any, name: str, value: Any) -> None:
    """
    대상 객체의 필드에 값을 주입합니다.

    Args:
        target: 대상 객체
        name: 필드 이름 (private 이름은 맹글링 전 이름으로 지정 가능)
        value: 주입할 값

    Raises:
        MemberNotFoundError: 클래스 계층 어디에도 필드가 없는 경우
    """
    attr = _resolve(target, name)
    if attr is None:
        raise MemberNotFoundError(f"Field {name} not defined", details={"target": type(target).__name__})
    setattr(target, attr, value)


def field(target: Any, name: str) -> Any:
    """
    대상 객체의 필드 값을 읽습니다.

    Raises:
        MemberNotFoundError: 클래스 계층 어디에도 필드가 없는 경우
    """
    attr = _resolve(target, name)
    if attr is None:
        raise MemberNotFoundError(f"Field {name} not defined", details={"target": type(target).__name__})
    return getattr(target, attr)


def invoke(target: Any, name: str, *args: Any, **kwargs: Any) -> Any:
    """
    대상 객체의 메서드를 호출합니다.

    Args:
        target: 대상 객체
        name: 메서드 이름
        *args: 위치 인자
        **kwargs: 키워드 인자

    Returns:
        Any: 메서드 반환값

    Raises:
        MemberNotFoundError: 메서드가 없거나 호출할 수 없는 경우
    """
    attr = _resolve(target, name)
    method = getattr(target, attr, None) if attr is not None else None
    if not callable(method):
        raise MemberNotFoundError(f"Method {name} not defined", details={"target": type(target).__name__})
    return method(*args, **kwargs)

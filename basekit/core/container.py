"""
컴포넌트 컨테이너 및 환경(프로파일) 관리

외부 DI 컨테이너가 만족해야 하는 좁은 계약(ApplicationContext)과
그 계약을 구현하는 프로세스 내 기본 컨테이너를 제공합니다.
"""

import inspect
from typing import (
    Any, Callable, Dict, Iterable, List, Optional, Protocol, Set, Type, TypeVar,
    get_type_hints, runtime_checkable
)

from .config import Settings, settings as default_settings
from .exceptions import ApplicationError, ComponentNotFoundError
from .logging import get_logger

T = TypeVar('T')

logger = get_logger(__name__)


class Environment:
    """활성 프로파일을 보관하는 실행 환경"""

    def __init__(self, profiles: Iterable[str] = ()):
        self._profiles: List[str] = [p for p in profiles if p]

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "Environment":
        """설정의 ACTIVE_PROFILES 값으로 환경 생성"""
        config = config or default_settings
        return cls(config.active_profiles_list)

    def get_active_profiles(self) -> List[str]:
        return list(self._profiles)

    def set_active_profiles(self, *profiles: str) -> None:
        self._profiles = [p for p in profiles if p]


@runtime_checkable
class ApplicationContext(Protocol):
    """라이브러리가 사용하는 컨테이너 계약"""

    environment: Environment

    def get_bean(self, name: Optional[str] = None, bean_type: Optional[Type[T]] = None) -> Any:
        ...

    def contains_bean(self, name: str) -> bool:
        ...


class _Registration:
    """컨테이너 등록 정보"""

    def __init__(
        self,
        name: Optional[str],
        bean_type: Optional[Type],
        instance: Any = None,
        factory: Optional[Callable[[], Any]] = None,
        implementation: Optional[Type] = None,
        resolved: bool = False,
    ):
        self.name = name
        self.bean_type = bean_type
        self.instance = instance
        self.factory = factory
        self.implementation = implementation
        self.resolved = resolved

    def matches_type(self, bean_type: Type) -> bool:
        if self.bean_type is not None and issubclass(self.bean_type, bean_type):
            return True
        if self.implementation is not None and issubclass(self.implementation, bean_type):
            return True
        return self.resolved and isinstance(self.instance, bean_type)


class DependencyContainer:
    """이름 및 타입 기반 컴포넌트 컨테이너"""

    def __init__(self, environment: Optional[Environment] = None):
        self.environment = environment or Environment.from_settings()
        self._registrations: List[_Registration] = []
        self._by_name: Dict[str, _Registration] = {}

    def register_instance(self, instance: Any, name: Optional[str] = None, bean_type: Optional[Type] = None) -> None:
        """인스턴스 직접 등록"""
        bean_type = bean_type or type(instance)
        self._add(_Registration(name, bean_type, instance=instance, resolved=True))
        logger.debug("Registered instance", bean_name=name, bean_type=bean_type.__name__)

    def register_factory(self, factory: Callable[[], Any], name: Optional[str] = None, bean_type: Optional[Type] = None) -> None:
        """팩토리 함수 등록 (조회할 때마다 새 인스턴스 생성)"""
        self._add(_Registration(name, bean_type, factory=factory))
        logger.debug("Registered factory", bean_name=name)

    def register_singleton(self, bean_type: Type[T], implementation: Optional[Type[T]] = None, name: Optional[str] = None) -> None:
        """싱글톤으로 컴포넌트 등록 (최초 조회 시 생성)"""
        implementation = implementation or bean_type
        self._add(_Registration(name, bean_type, implementation=implementation))
        logger.debug("Registered singleton", bean_name=name, bean_type=bean_type.__name__,
                     implementation=implementation.__name__)

    def get_bean(self, name: Optional[str] = None, bean_type: Optional[Type[T]] = None) -> Any:
        """이름, 타입 또는 둘 다로 컴포넌트 조회"""
        if name is None and bean_type is None:
            raise ValueError("Either name or bean_type must be provided")

        if name is not None:
            registration = self._by_name.get(name)
            if registration is None:
                raise ComponentNotFoundError(f"No component named '{name}'")
            bean = self._resolve(registration)
            if bean_type is not None and not isinstance(bean, bean_type):
                raise ComponentNotFoundError(
                    f"Component '{name}' is not of type {bean_type.__name__}",
                    details={"actual_type": type(bean).__name__}
                )
            return bean

        candidates = [r for r in self._registrations if r.bean_type is bean_type]
        if not candidates:
            candidates = [r for r in self._registrations if r.matches_type(bean_type)]
        if not candidates:
            raise ComponentNotFoundError(f"No component of type {bean_type.__name__}")
        if len(candidates) > 1:
            raise ComponentNotFoundError(
                f"Expected single component of type {bean_type.__name__} but found {len(candidates)}"
            )
        return self._resolve(candidates[0])

    def contains_bean(self, name: str) -> bool:
        return name in self._by_name

    def bean_names(self) -> Set[str]:
        return set(self._by_name)

    def clear(self) -> None:
        """모든 등록된 컴포넌트 제거"""
        self._registrations.clear()
        self._by_name.clear()
        logger.debug("Container cleared")

    def _add(self, registration: _Registration) -> None:
        if registration.name is not None:
            previous = self._by_name.get(registration.name)
            if previous is not None:
                self._registrations.remove(previous)
            self._by_name[registration.name] = registration
        self._registrations.append(registration)

    def _resolve(self, registration: _Registration) -> Any:
        if registration.resolved:
            return registration.instance
        if registration.factory is not None:
            return registration.factory()

        registration.instance = self._create_instance(registration.implementation)
        registration.resolved = True
        return registration.instance

    def _create_instance(self, cls: Type[T]) -> T:
        """생성자 타입 힌트를 이용한 의존성 주입으로 인스턴스 생성"""
        if inspect.isabstract(cls):
            raise ApplicationError(f"Cannot instantiate abstract class: {cls.__name__}")

        if cls.__init__ is object.__init__:
            return cls()

        signature = inspect.signature(cls.__init__)
        type_hints = get_type_hints(cls.__init__)

        kwargs = {}
        for param_name, param in signature.parameters.items():
            if param_name == 'self' or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue

            # 기본값이 있는 파라미터는 주입하지 않음
            if param.default is not param.empty:
                continue

            param_type = type_hints.get(param_name)
            if param_type is None:
                raise ApplicationError(f"No type hint for parameter '{param_name}' in {cls.__name__}")

            kwargs[param_name] = self.get_bean(bean_type=param_type)

        instance = cls(**kwargs)
        logger.debug("Created instance", bean_type=cls.__name__)
        return instance


# 전역 컨테이너 인스턴스
_container = DependencyContainer()


def get_container() -> DependencyContainer:
    """전역 컨테이너 반환"""
    return _container

"""
컨테이너 접근 파사드

컴포넌트 조회, 활성 프로파일 확인, 프록시 대상 추출 기능을 믹스인으로 제공합니다.
컨테이너 자체는 구현하지 않고 ApplicationContext 계약에 위임합니다.
"""

import inspect
from typing import Any, Optional, Set, Type, TypeVar

from .config import settings
from .container import ApplicationContext, Environment, get_container
from .exceptions import ProxyUnwrapError

T = TypeVar('T')

# 운영 프로파일 이름 (PRODUCTION_PROFILE 환경 변수, 기본값 "production")
PRODUCTION_PROFILE = settings.production_profile


class ContextAwareMixin:
    """컨테이너 접근 믹스인 클래스"""

    _ctx: Optional[ApplicationContext] = None

    @property
    def ctx(self) -> ApplicationContext:
        """주입된 컨텍스트 (없으면 전역 컨테이너)"""
        return self._ctx if self._ctx is not None else get_container()

    @property
    def env(self) -> Environment:
        return self.ctx.environment

    def set_ctx(self, context: ApplicationContext) -> None:
        """컨텍스트 교체 (테스트 등에서 사용)"""
        self._ctx = context

    def bean(self, name: Optional[str] = None, bean_type: Optional[Type[T]] = None) -> Any:
        """
        컨텍스트에서 컴포넌트를 조회합니다.

        Args:
            name: 컴포넌트 이름
            bean_type: 컴포넌트 타입 (이름과 함께 주어지면 타입 검사에 사용)

        Returns:
            Any: 조회된 컴포넌트
        """
        return self.ctx.get_bean(name=name, bean_type=bean_type)

    def has_bean(self, name: str) -> bool:
        return self.ctx.contains_bean(name)

    def get_profiles(self) -> Set[str]:
        """활성 프로파일 이름 집합 반환"""
        return set(self.env.get_active_profiles())

    def is_prod_mode(self) -> bool:
        """운영(production) 프로파일 활성 여부"""
        return PRODUCTION_PROFILE in self.get_profiles()

    @staticmethod
    def target(bean: Any) -> Any:
        """
        프록시로 감싸진 객체라면 실제 대상 객체를 반환합니다.

        __wrapped__ 체인을 끝까지 따라갑니다. 프록시가 아니면 그대로 반환합니다.

        Raises:
            ProxyUnwrapError: 순환 체인 등으로 대상을 추출할 수 없는 경우
        """
        try:
            return inspect.unwrap(bean)
        except ValueError as e:
            raise ProxyUnwrapError(f"Cannot resolve proxy target of {type(bean).__name__}", cause=e) from e

"""
basekit: 애플리케이션 공통 기반 유틸리티

컬렉션, 시간, 숫자, 문자열, 파싱, 대기 헬퍼와 컨테이너 접근 믹스인을 제공합니다.
"""

from .core.context import PRODUCTION_PROFILE, ContextAwareMixin
from .core.container import ApplicationContext, DependencyContainer, Environment, get_container
from .core.error_handler import TaskErrorHandler
from .core.exceptions import ApplicationError, LocalizedError, wrap_error
from .utils import *  # noqa: F401,F403
from .utils import __all__ as _utils_all

__version__ = "0.1.0"

__all__ = [
    "PRODUCTION_PROFILE",
    "ContextAwareMixin",
    "ApplicationContext",
    "DependencyContainer",
    "Environment",
    "get_container",
    "TaskErrorHandler",
    "ApplicationError",
    "LocalizedError",
    "wrap_error",
] + list(_utils_all)

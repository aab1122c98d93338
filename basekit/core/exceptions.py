"""
라이브러리 예외 클래스 정의

인프라 오류(지원하지 않는 알고리즘, 잘못된 XML, 리플렉션 대상 없음, 리소스 읽기 실패 등)는
모두 ApplicationError 계열로 감싸서 전파합니다.
"""

from typing import Any, Dict, List, Optional


class ApplicationError(Exception):
    """라이브러리 기본 예외 클래스 (원인 예외를 감싸는 unchecked 오류)"""

    def __init__(
        self,
        message: str = "",
        cause: Optional[BaseException] = None,
        error_code: str = None,
        details: Dict[str, Any] = None,
        log_full_stack: bool = True
    ):
        if not message and cause is not None:
            message = str(cause)
        self.message = message
        self.cause = cause
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.log_full_stack = log_full_stack
        self.error_id: Optional[str] = None
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def root_cause(self) -> BaseException:
        """가장 안쪽의 원인 예외 반환 (원인이 없으면 자기 자신)"""
        current: BaseException = self
        seen = set()
        while current.__cause__ is not None and id(current) not in seen:
            seen.add(id(current))
            current = current.__cause__
        return current

    def to_dict(self) -> Dict[str, Any]:
        """예외를 딕셔너리로 변환"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class MemberNotFoundError(ApplicationError, AttributeError):
    """리플렉션 대상 필드/메서드를 찾을 수 없음"""
    pass


class DigestAlgorithmError(ApplicationError, ValueError):
    """지원하지 않는 다이제스트 알고리즘"""
    pass


class EncodingError(ApplicationError, LookupError):
    """지원하지 않는 문자 인코딩"""
    pass


class XmlProcessingError(ApplicationError):
    """XML 파싱 또는 XPath 평가 오류"""
    pass


class ResourceReadError(ApplicationError, OSError):
    """리소스 읽기 오류"""
    pass


class ProxyUnwrapError(ApplicationError):
    """프록시 대상 객체 추출 오류"""
    pass


class ComponentNotFoundError(ApplicationError, LookupError):
    """컨테이너에서 컴포넌트를 찾을 수 없음"""
    pass


class LocalizedError:
    """다국어 메시지를 갖는 예외용 믹스인"""

    def message_params(self) -> List[Any]:
        """오류 메시지에 치환될 순서대로의 파라미터 목록"""
        return list(getattr(self, "params", []))


def wrap_error(
    error: BaseException,
    message: str = None,
    log_full_stack: bool = True
) -> ApplicationError:
    """임의의 예외를 ApplicationError로 감싸는 헬퍼 함수"""

    if isinstance(error, ApplicationError) and message is None:
        return error

    return ApplicationError(
        message=message or str(error),
        cause=error,
        details={"error_type": type(error).__name__},
        log_full_stack=log_full_stack
    )

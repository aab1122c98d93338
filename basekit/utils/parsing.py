"""
파싱 유틸리티

정규식 그룹 추출, XPath 평가, 열거형 파싱 함수들을 제공합니다.
"""

import re
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from lxml import etree

from ..core.exceptions import XmlProcessingError
from .datetime import parse_local_date

E = TypeVar('E', bound=Enum)

NamespaceSpec = Union[Tuple[str, str], Mapping[str, str]]

_REGEX_FLAGS = re.IGNORECASE | re.DOTALL | re.MULTILINE


class XPathResult(Enum):
    """XPath 평가 결과 타입"""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NODESET = "nodeset"


def regexp_groups(text: str, pattern: str, *groups: int) -> Optional[List[str]]:
    """
    첫 번째 매치에서 요청한 그룹들을 순서대로 추출합니다.

    대소문자 무시, DOTALL, MULTILINE 플래그로 검색하며,
    매치에 참여하지 않은 그룹은 결과에서 제외됩니다.

    Args:
        text: 검색할 텍스트
        pattern: 정규식 패턴
        *groups: 추출할 그룹 번호들

    Returns:
        Optional[List[str]]: 그룹 값 목록 (매치가 없으면 None)
    """
    match = re.search(pattern, text, _REGEX_FLAGS)
    if match is None:
        return None
    return [value for value in (match.group(g) for g in groups) if value is not None]


def regexp(text: str, pattern: str, *groups: int) -> Optional[str]:
    """regexp_groups 결과를 이어붙인 문자열 (매치가 없으면 None)"""
    values = regexp_groups(text, pattern, *groups)
    return None if values is None else "".join(values)


def _namespaces(namespace: Optional[NamespaceSpec]) -> Optional[dict]:
    if namespace is None:
        return None
    if isinstance(namespace, tuple):
        prefix, uri = namespace
        return {prefix: uri}
    return dict(namespace)


def xpath(
    xml: Union[str, bytes],
    query: str,
    result_type: XPathResult = XPathResult.STRING,
    namespace: Optional[NamespaceSpec] = None
) -> Any:
    """
    XML 문서에 XPath 질의를 평가합니다.

    Args:
        xml: XML 문서
        query: XPath 1.0 질의
        result_type: 결과 타입 (기본값 STRING, 노드 문자열 값을 이어붙인 결과)
        namespace: (prefix, uri) 쌍 또는 prefix -> uri 매핑

    Returns:
        Any: STRING은 str, NUMBER는 float, BOOLEAN은 bool, NODESET은 노드 목록

    Raises:
        XmlProcessingError: XML이 올바르지 않거나 질의를 평가할 수 없는 경우
    """
    if isinstance(xml, str):
        xml = xml.encode('utf-8')

    if result_type is XPathResult.NODESET:
        expression = query
    else:
        expression = f"{result_type.value}({query})"

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(xml, parser)
        return root.getroottree().xpath(expression, namespaces=_namespaces(namespace))
    except (etree.XMLSyntaxError, etree.XPathError) as e:
        raise XmlProcessingError(
            f"XPath evaluation failed: {e}",
            cause=e,
            details={"query": query}
        ) from e


def parse_enum(enum_cls: Type[E], value: Optional[str]) -> Optional[E]:
    """
    이름으로 열거형 멤버를 찾습니다.

    Args:
        enum_cls: 열거형 클래스
        value: 멤버 이름 (대소문자 구분)

    Returns:
        Optional[E]: 열거형 멤버 (None이거나 없는 이름이면 None)
    """
    if value is None:
        return None
    try:
        return enum_cls[value]
    except KeyError:
        return None


__all__ = [
    "XPathResult",
    "regexp_groups",
    "regexp",
    "xpath",
    "parse_enum",
    "parse_local_date",
]

"""
URI 조합 유틸리티
"""

# 생략하는 표준 HTTP 포트
_DEFAULT_PORTS = (80, 443)


def get_base_url(scheme: str, host: str, port: int) -> str:
    """
    서버 위치 문자열을 만듭니다. 표준 포트(80, 443)는 표시하지 않습니다.

    Args:
        scheme: http 또는 https
        host: 호스트 이름
        port: 포트 번호

    Returns:
        str: scheme://host[:port]
    """
    suffix = "" if port in _DEFAULT_PORTS else f":{port}"
    return f"{scheme}://{host}{suffix}"


def get_uri(scheme: str, host: str, port: int, path: str) -> str:
    """
    HTTP 리소스의 전체 URI를 만듭니다.

    Args:
        scheme: http 또는 https
        host: 호스트 이름
        port: 포트 번호
        path: 상대 경로(예: "/ping") 또는 호스트를 포함한 전체 URL

    Returns:
        str: 전체 URI (path가 이미 전체 URL이면 그대로 반환)
    """
    if has_host(path):
        return path
    if not path.startswith("/"):
        path = "/" + path
    return get_base_url(scheme, host, port) + path


def has_host(path: str) -> bool:
    """URL에 호스트(http:// 또는 https://)가 포함되어 있는지 확인합니다."""
    return path.startswith(("http://", "https://"))

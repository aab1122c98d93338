"""
해싱 유틸리티

텍스트 다이제스트 계산 함수들을 제공합니다.
"""

import hashlib
from typing import Iterator

from ..core.exceptions import DigestAlgorithmError


def _algorithm_names(algorithm: str) -> Iterator[str]:
    # JCA 스타일 이름(SHA-256, SHA3-256, MD5)과 hashlib 이름을 모두 허용
    name = algorithm.lower()
    yield name
    yield name.replace("-", "")
    yield name.replace("-", "_")


def _new_hasher(algorithm: str):
    for name in _algorithm_names(algorithm):
        # 가변 길이 다이제스트(SHAKE)는 길이 없이 계산할 수 없음
        if name.startswith("shake"):
            break
        try:
            return hashlib.new(name)
        except ValueError:
            continue
    raise DigestAlgorithmError(
        f"지원하지 않는 해싱 알고리즘: {algorithm}",
        details={"algorithm": algorithm}
    )


def digest(text: str, algorithm: str) -> str:
    """
    텍스트의 다이제스트를 계산합니다.

    Args:
        text: 해싱할 텍스트 (UTF-8로 인코딩)
        algorithm: 해싱 알고리즘 이름 (예: "SHA-256", "sha256", "MD5")

    Returns:
        str: 소문자 16진수 해시값

    Raises:
        DigestAlgorithmError: 지원하지 않는 알고리즘인 경우
    """
    hasher = _new_hasher(algorithm)
    hasher.update(text.encode('utf-8'))
    return hasher.hexdigest()


def sha256(text: str) -> str:
    """
    텍스트의 SHA-256 해시를 계산합니다.

    Returns:
        str: 64자리 16진수 해시값
    """
    return digest(text, "SHA-256")


def get_supported_algorithms() -> list[str]:
    """
    지원되는 해싱 알고리즘 목록을 반환합니다.

    Returns:
        list[str]: 지원되는 알고리즘 목록
    """
    return sorted(hashlib.algorithms_available)

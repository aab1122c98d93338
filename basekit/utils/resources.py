"""
리소스 읽기 유틸리티

패키지 리소스(importlib.resources) 또는 파일 시스템 경로의 내용을 읽습니다.
"""

from importlib import resources
from pathlib import Path
from typing import Optional, Union

from ..core.exceptions import ResourceReadError
from .text import DEFAULT_CHARSET

PathLike = Union[str, Path]


def read_as_bytes(path: PathLike, anchor: Optional[str] = None) -> bytes:
    """
    리소스 내용을 바이트로 읽습니다.

    Args:
        path: 리소스 경로 (anchor가 있으면 패키지 안의 상대 경로)
        anchor: 리소스를 담고 있는 패키지 이름 (예: "basekit.utils")

    Returns:
        bytes: 리소스 내용

    Raises:
        ResourceReadError: 리소스가 없거나 읽을 수 없는 경우
    """
    try:
        if anchor is None:
            return Path(path).read_bytes()
        return resources.files(anchor).joinpath(str(path)).read_bytes()
    except (OSError, ModuleNotFoundError) as e:
        raise ResourceReadError(
            f"리소스를 읽을 수 없습니다: {path}",
            cause=e,
            details={"path": str(path), "anchor": anchor}
        ) from e


def read_as_string(path: PathLike, anchor: Optional[str] = None) -> str:
    """리소스 내용을 UTF-8 문자열로 읽습니다."""
    return read_as_bytes(path, anchor).decode(DEFAULT_CHARSET)

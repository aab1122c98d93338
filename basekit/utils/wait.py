"""
대기/폴링 유틸리티
"""

import time
from typing import Any, Callable

from ..core.logging import get_logger

logger = get_logger(__name__)

# 진행률 로그를 남기는 구간 (%)
PROGRESS_THRESHOLDS = (10, 25, 50, 75, 90)


def sleep(millis: int) -> None:
    """
    지정한 밀리초 동안 현재 스레드를 멈춥니다.

    KeyboardInterrupt 같은 인터럽트는 호출자에게 그대로 전파됩니다.
    """
    time.sleep(millis / 1000)


def wait_condition(
    location: str,
    secs: int,
    callback: Callable[..., Any],
    *args: Any,
    sleep_ms: int = 500,
    log_progress: bool = False
) -> bool:
    """
    조건 콜백이 참이 될 때까지 주기적으로 대기합니다.

    경과 시간은 실제 시계가 아니라 sleep 간격의 합으로 계산합니다.

    Args:
        location: 진행률 로그에 남길 호출 위치
        secs: 최대 대기 시간 (초)
        callback: 조건 콜백 (args를 인자로 호출)
        *args: 콜백 인자
        sleep_ms: 확인 간격 (밀리초)
        log_progress: 진행률 구간을 지날 때마다 로그를 남길지 여부

    Returns:
        bool: 조건이 충족되지 않은 채 제한 시간을 넘긴 경우 True
    """
    limit = secs * 1000
    elapsed = 0
    pending = set(PROGRESS_THRESHOLDS)

    while not callback(*args):
        percent = 100 * elapsed / limit if limit > 0 else 100
        passed = sorted(t for t in pending if t < percent)
        if passed:
            if log_progress:
                logger.info("wait progress", location=location, percent=passed[0])
            pending.difference_update(passed)

        elapsed += sleep_ms
        if elapsed > limit:
            break
        sleep(sleep_ms)

    return elapsed > limit

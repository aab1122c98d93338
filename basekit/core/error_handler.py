"""
스케줄 작업 오류 핸들러
"""

from .exceptions import ApplicationError, wrap_error
from .logging import LoggerMixin


class TaskErrorHandler(LoggerMixin):
    """
    스케줄 작업에서 발생한 오류를 로깅하고 다시 전파합니다.

    ApplicationError의 log_full_stack 플래그에 따라 전체 스택 또는 메시지만 기록합니다.
    """

    def handle_error(self, error: BaseException) -> None:
        if isinstance(error, ApplicationError):
            if error.log_full_stack:
                self.logger.error("Scheduler error", error_message=error.message, exc_info=error)
            else:
                self.logger.error("Scheduler error", error_message=error.message)
        else:
            root = wrap_error(error).root_cause
            self.logger.error("Scheduler error", error_message=str(root), exc_info=root)

        raise error

"""
로깅 모듈 단위 테스트
"""

import pytest
from unittest.mock import patch, MagicMock
import structlog

from basekit.core.logging import (
    setup_logging,
    get_logger,
    LoggerMixin,
    log,
    error,
    log_error
)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


class TestLoggingSetup:
    """로깅 설정 테스트"""

    @patch('basekit.core.logging.settings')
    @patch('structlog.configure')
    def test_setup_logging_debug_mode(self, mock_configure, mock_settings):
        """디버그 모드 로깅 설정 테스트"""
        mock_settings.debug = True
        mock_settings.log_level = "DEBUG"

        setup_logging()

        mock_configure.assert_called_once()

        processors = mock_configure.call_args[1]['processors']

        # 디버그 모드에서는 ConsoleRenderer
        assert any('ConsoleRenderer' in str(processor) for processor in processors)

    @patch('basekit.core.logging.settings')
    @patch('structlog.configure')
    def test_setup_logging_production_mode(self, mock_configure, mock_settings):
        """프로덕션 모드 로깅 설정 테스트"""
        mock_settings.debug = False
        mock_settings.log_level = "info"

        setup_logging()

        processors = mock_configure.call_args[1]['processors']
        assert any('JSONRenderer' in str(processor) for processor in processors)
        assert mock_configure.call_args[1]['cache_logger_on_first_use'] is True


class TestGetLogger:
    """로거 인스턴스 테스트"""

    @patch('structlog.get_logger')
    def test_get_logger(self, mock_get_logger):
        """로거 인스턴스 반환 테스트"""
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger

        logger = get_logger("test_module")

        mock_get_logger.assert_called_once_with("test_module")
        assert logger == mock_logger


class TestLoggerMixin:
    """로거 믹스인 테스트"""

    def test_logger_mixin(self):
        """로거 믹스인 속성 테스트"""
        class Worker(LoggerMixin):
            pass

        logger = Worker().logger

        assert hasattr(logger, 'info')
        assert hasattr(logger, 'error')
        assert hasattr(logger, 'debug')

    @patch('basekit.core.logging.get_logger')
    def test_logger_named_after_class(self, mock_get_logger):
        class Worker(LoggerMixin):
            pass

        _ = Worker().logger
        mock_get_logger.assert_called_once_with("Worker")


class TestInstantLogs:
    """즉시 로그 함수 테스트"""

    @patch('basekit.core.logging.get_logger')
    def test_log(self, mock_get_logger):
        log("something happened", key="value")

        mock_get_logger.assert_called_once_with("basekit")
        mock_get_logger.return_value.info.assert_called_once_with("something happened", key="value")

    @patch('basekit.core.logging.get_logger')
    def test_error(self, mock_get_logger):
        error("something failed", code=1)

        mock_get_logger.return_value.error.assert_called_once_with("something failed", code=1)


class TestLogError:
    """에러 로그 컨텍스트 테스트"""

    def test_log_error_basic(self):
        """기본 에러 로그 컨텍스트 테스트"""
        result = log_error(ValueError("Test error message"))

        assert result == {
            "error_type": "ValueError",
            "error_message": "Test error message",
            "log_event": "error"
        }

    def test_log_error_with_context(self):
        """컨텍스트가 있는 에러 로그 테스트"""
        result = log_error(RuntimeError("Runtime error"), {"task": "cleanup"})

        assert result["error_type"] == "RuntimeError"
        assert result["task"] == "cleanup"

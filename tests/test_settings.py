"""Tests for configuration, logging setup and error payloads."""
import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from hostel_core.config.logging import CustomJsonFormatter, build_logging_config
from hostel_core.config.settings import Settings
from hostel_core.core.exceptions import CapacityViolation, ErrorCode, NotFoundError
from hostel_core.core.logging import get_logger, setup_logging


class TestSettings:
    def test_log_level_is_normalized(self):
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(PydanticValidationError):
            Settings(LOG_LEVEL="chatty")

    def test_log_format_must_be_known(self):
        assert Settings(LOG_FORMAT="JSON").LOG_FORMAT == "json"
        with pytest.raises(PydanticValidationError):
            Settings(LOG_FORMAT="xml")

    def test_isolation_level_is_normalized(self):
        assert Settings(SNAPSHOT_ISOLATION_LEVEL=" serializable ").SNAPSHOT_ISOLATION_LEVEL == "SERIALIZABLE"
        assert Settings(SNAPSHOT_ISOLATION_LEVEL="").SNAPSHOT_ISOLATION_LEVEL is None

    def test_lock_timeout_must_be_positive(self):
        with pytest.raises(PydanticValidationError):
            Settings(DB_LOCK_TIMEOUT_SECONDS=0)

    def test_dialect_detection(self):
        assert Settings(DATABASE_URL="sqlite:///:memory:").is_sqlite()
        assert not Settings(DATABASE_URL="postgresql://u:p@localhost/hostel").is_sqlite()


class TestLoggingConfig:
    def test_json_console_formatter(self):
        config = build_logging_config(Settings(LOG_FORMAT="json", ENVIRONMENT="production"))
        assert config["handlers"]["console"]["formatter"] == "json"
        assert config["formatters"]["json"]["environment"] == "production"

    def test_colored_output_in_development(self):
        config = build_logging_config(Settings(ENVIRONMENT="development"))
        assert config["handlers"]["console"]["formatter"] == "colored"

    def test_file_handler_added(self, tmp_path):
        log_file = tmp_path / "logs" / "core.log"
        config = build_logging_config(Settings(LOG_FILE=str(log_file)))

        assert config["handlers"]["file"]["filename"] == str(log_file)
        assert "file" in config["loggers"][""]["handlers"]
        assert log_file.parent.is_dir()

    def test_setup_logging_applies_level(self):
        root = logging.getLogger()
        saved_level, saved_handlers = root.level, list(root.handlers)
        try:
            setup_logging(Settings(LOG_LEVEL="warning", ENVIRONMENT="testing"))
            assert root.level == logging.WARNING
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_json_formatter_adds_fields(self):
        formatter = CustomJsonFormatter(environment="testing")
        record = logging.LogRecord("hostel_core", logging.INFO, __file__, 1, "hello", None, None)
        output = formatter.format(record)
        assert '"environment": "testing"' in output
        assert '"level": "INFO"' in output

    def test_logger_adapter_context(self, caplog):
        log = get_logger("hostel_core.tests").add_context(room_id="r-1")
        with caplog.at_level(logging.INFO, logger="hostel_core.tests"):
            log.info("resized")
        assert caplog.records[-1].room_id == "r-1"


class TestErrorPayloads:
    def test_not_found_to_dict(self):
        payload = NotFoundError("Room", "r-1").to_dict()["error"]
        assert payload["code"] == ErrorCode.NOT_FOUND.value
        assert payload["details"] == {"resource_type": "Room", "resource_id": "r-1"}
        assert payload["type"] == "NotFoundError"

    def test_capacity_violation_is_conflict(self):
        error = CapacityViolation("r-1", 1, 2)
        assert error.status_code == 409
        assert error.error_code == ErrorCode.CAPACITY_VIOLATION
        assert error.details["occupied_beds"] == 2

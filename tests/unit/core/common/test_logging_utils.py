import logging

import pytest

from package_builder.core.common.logging_utils import (
    EnvironmentTaggingFilter,
    LogContext,
    configure_logging_with_environment_tagging,
    get_logger,
)


def test_environment_filter_tags_test_records() -> None:
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "message", None, None)

    assert EnvironmentTaggingFilter().filter(record) is True
    assert record.env_tag == "test"


def test_log_file_receives_records(tmp_path) -> None:
    log_file = tmp_path / "package-builder.log"
    configure_logging_with_environment_tagging(level=logging.INFO, log_file=str(log_file))

    get_logger("package_builder.test").info("Package built", package="Test.1.0.0.nupkg")
    logging.getLogger("package_builder.test").debug("hidden")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "[test]" in content
    assert "event='Package built'" in content
    assert "package='Test.1.0.0.nupkg'" in content
    assert "hidden" not in content


def test_log_context_binds_logger() -> None:
    context = LogContext(get_logger(__name__), module="Test")

    with context as log:
        assert log is not None
        assert context.get_logger() is log

    with pytest.raises(RuntimeError):
        context.get_logger()

import json
import logging

from shared.logger import PassgenLogger, configure_logging


def test_json_file_log(tmp_path):
    log_file = tmp_path / "logs" / "passgen.log"
    configure_logging("DEBUG", log_file=log_file, json_logs=True, console_output=False)

    log = PassgenLogger("tests")
    with log.operation("check_password"):
        log.info("checked %d secret(s)", 1, corpus="all")
    log.debug("outside")

    lines = log_file.read_text(encoding="utf-8").splitlines()
    first, second = (json.loads(line) for line in lines)

    assert first["message"] == "checked 1 secret(s)"
    assert first["logger"] == "passgen.tests"
    assert first["component"] == "tests"
    assert first["operation"] == "check_password"
    assert first["extra"] == {"corpus": "all"}
    assert "operation" not in second


def test_reconfigure_replaces_handlers(tmp_path):
    configure_logging("INFO", log_file=tmp_path / "a.log")
    root = configure_logging("INFO", log_file=tmp_path / "a.log")
    assert len(root.handlers) == 2
    assert root.level == logging.INFO
    assert root.propagate is False


def test_unknown_level_falls_back_to_warning():
    root = configure_logging("chatty", console_output=False)
    assert root.level == logging.WARNING


def test_timed_logs_at_debug(tmp_path):
    log_file = tmp_path / "timed.log"
    configure_logging("DEBUG", log_file=log_file, console_output=False)

    log = PassgenLogger("tests")
    with log.timed("load corpus") as timer:
        pass

    text = log_file.read_text(encoding="utf-8")
    assert "Started: load corpus" in text
    assert "Completed: load corpus" in text
    assert timer.elapsed >= 0
    assert log.component == "tests"
    assert log.underlying.name == "passgen.tests"


def test_logger_exposes_level_methods_only():
    log = PassgenLogger("api")
    for name in ("debug", "info", "warning", "error"):
        assert callable(getattr(log, name))
    assert not hasattr(log, "exception")

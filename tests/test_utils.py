import logging

from qwop_ai.utils.file_utils import load_json, save_json
from qwop_ai.utils.logger import get_logger, setup_logger
from qwop_ai.utils.time_utils import Timer, format_duration

def test_format_duration():
    assert format_duration(0) == "0.00s"
    assert format_duration(1.5) == "1.50s"
    assert format_duration(3723) == "1h 2m 3.00s"
    assert format_duration(-1) == "0s"

def test_timer_measures_block(monkeypatch):
    readings = [10.0, 10.25]
    monkeypatch.setattr("qwop_ai.utils.time_utils.time.time",
                        lambda: readings.pop(0) if len(readings) > 1 else readings[0])

    with Timer("block") as timer:
        pass

    assert timer.elapsed_ms() == 250

def test_json_round_trip_and_default(tmp_path):
    path = str(tmp_path / "nested" / "data.json")

    assert save_json({"a": [1, 2]}, path)
    assert load_json(path) == {"a": [1, 2]}
    assert load_json(str(tmp_path / "missing.json"), default={}) == {}

def test_module_loggers_share_package_handlers(tmp_path):
    log_file = str(tmp_path / "run.log")
    package = setup_logger("qwop_ai.test_session", log_level=logging.INFO, log_file=log_file)

    child = get_logger("qwop_ai.test_session.child")
    child.info("hello from child")
    for handler in package.handlers:
        handler.flush()

    assert get_logger("main").name == "qwop_ai.main"
    assert "hello from child" in open(log_file, encoding="utf-8").read()
    for handler in list(package.handlers):
        handler.close()
        package.removeHandler(handler)

import pytest

from fingertrail.__main__ import build_config, parse_args
from fingertrail.config import CFG


def test_defaults_match_config():
    cfg = build_config(parse_args([]))
    assert cfg == CFG
    assert cfg.max_trail_length == 50
    assert cfg.detection_interval_ms == 100
    assert cfg.max_results == 20


def test_overrides():
    cfg = build_config(parse_args([
        "--camera", "2", "--interval-ms", "250", "--max-trail", "10",
        "--model", "m.tflite", "--log-level", "DEBUG",
    ]))
    assert cfg.cam_index == 2
    assert cfg.detection_interval_ms == 250
    assert cfg.max_trail_length == 10
    assert cfg.model_task_path == "m.tflite"
    assert cfg.log_level == "DEBUG"
    # 나머지는 기본값
    assert cfg.preferred_labels == ("person", "hand")


@pytest.mark.parametrize("value", ["0", "-3", "abc"])
def test_max_trail_must_be_positive(value, capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(["--max-trail", value])
    assert exc.value.code == 2
    assert "--max-trail" in capsys.readouterr().err

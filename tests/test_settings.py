from pathlib import Path

from wordgrid.settings import Settings, EDITABLE_FIELDS, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_default_paths_follow_base_dir(tmp_path):
    cfg = Settings(BASE_DIR=tmp_path)
    assert cfg.BOARD_PATH == tmp_path / "board.txt"
    assert cfg.WORD_LIST_PATH == tmp_path / "words.txt"


def test_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("MIN_WORD_LENGTH", "4")
    monkeypatch.setenv("PARALLEL", "no")
    monkeypatch.setenv("WORD_LIST_PATH", str(tmp_path / "dict.txt"))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    cfg = _fresh_settings()
    assert cfg.MIN_WORD_LENGTH == 4
    assert cfg.PARALLEL is False
    assert cfg.WORD_LIST_PATH == Path(tmp_path / "dict.txt")
    assert cfg.LOG_LEVEL == "DEBUG"


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["PARALLEL"] == cfg.PARALLEL
    assert result["MAX_RESULTS"] == cfg.MAX_RESULTS


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_WORKERS=7)
    assert errors == {}
    assert cfg.MAX_WORKERS == 7


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MIN_WORD_LENGTH="3")
    assert errors == {}
    assert cfg.MIN_WORD_LENGTH == 3


def test_update_bool_from_json_true():
    """JSON sends true/false as Python bool, not string."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG=True)
    assert errors == {}
    assert cfg.DEBUG is True


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, PARALLEL="false")
    assert errors == {}
    assert cfg.PARALLEL is False

    errors = update_settings(cfg, PARALLEL="true")
    assert errors == {}
    assert cfg.PARALLEL is True


def test_update_multiple_fields():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=10, MIN_WORD_LENGTH=4, DEBUG=True)
    assert errors == {}
    assert cfg.MAX_RESULTS == 10
    assert cfg.MIN_WORD_LENGTH == 4
    assert cfg.DEBUG is True


def test_update_invalid_int_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS="lots")
    assert "MAX_RESULTS" in errors
    assert cfg.MAX_RESULTS == 0


def test_update_negative_int_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_WORKERS=-1)
    assert "MAX_WORKERS" in errors


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, LOG_LEVEL="DEBUG")
    assert "LOG_LEVEL" in errors


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_RESULTS == 25

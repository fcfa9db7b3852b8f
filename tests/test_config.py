import textwrap

from orderprice.config import refresh_config


def test_config_defaults_without_pyproject(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = refresh_config(tmp_path)

    assert cfg.log_level == "WARNING"
    assert cfg.display_precision == 2
    assert cfg.json_indent == 2


def test_config_loads_from_pyproject(tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text(
        textwrap.dedent(
            """
            [tool.orderprice]
            log_level = "debug"
            display_precision = 4
            json_indent = 0
            """
        ),
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    cfg = refresh_config()

    assert cfg.log_level == "DEBUG"
    assert cfg.display_precision == 4
    assert cfg.json_indent == 0


def test_env_overrides_pyproject(tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text("[tool.orderprice]\ndisplay_precision = 4\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ORDERPRICE_DISPLAY_PRECISION", "0")
    monkeypatch.setenv("ORDERPRICE_LOG_LEVEL", "info")

    cfg = refresh_config()
    assert cfg.display_precision == 0
    assert cfg.log_level == "INFO"


def test_invalid_values_fall_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ORDERPRICE_DISPLAY_PRECISION", "lots")
    monkeypatch.setenv("ORDERPRICE_LOG_LEVEL", "chatty")
    monkeypatch.setenv("ORDERPRICE_JSON_INDENT", "-3")

    cfg = refresh_config(tmp_path)
    assert cfg.display_precision == 2
    assert cfg.log_level == "WARNING"
    assert cfg.json_indent == 0

import yaml

from testfactory.common import GlobalConfig, get_config, set_config


def test_env_override_and_defaults(monkeypatch, tmp_path):
    config_path = tmp_path / "testfactory.yaml"
    config_path.write_text(
        yaml.dump({"ui": {"base_url": "http://example.com", "wait_timeout": 10}}),
        encoding="utf-8",
    )

    GlobalConfig.reset()
    config = GlobalConfig(config_path=config_path)
    assert config.get("ui.base_url") == "http://example.com"
    assert config.get("ui.wait_interval") == 0.5
    assert config.get("ui.retry_count", 3) == 3

    GlobalConfig.reset()
    monkeypatch.setenv("UI_BASE_URL", "http://env.example.com")
    config = GlobalConfig(config_path=config_path)
    assert config.get("ui.base_url") == "http://env.example.com"


def test_reload_updates_values(tmp_path):
    config_path = tmp_path / "testfactory.yaml"
    config_path.write_text(yaml.dump({"ui": {"wait_timeout": 5}}), encoding="utf-8")

    GlobalConfig.reset()
    config = GlobalConfig(config_path=config_path)
    assert config.get("ui.wait_timeout") == 5

    config_path.write_text(yaml.dump({"ui": {"wait_timeout": 15}}), encoding="utf-8")
    config.reload()
    assert config.get("ui.wait_timeout") == 15


def test_missing_file_uses_defaults(tmp_path):
    GlobalConfig.reset()
    config = GlobalConfig(config_path=tmp_path / "absent.yaml")

    assert config.get("ui.expected_element_timeout") == 30
    assert config.get("logging.level") == "INFO"


def test_singleton_and_module_helpers():
    assert GlobalConfig() is GlobalConfig()

    set_config("ui.extra.flag", True)
    assert get_config("ui.extra.flag") is True
    assert get_config("ui.extra.missing", "fallback") == "fallback"


def test_init_logger_writes_to_configured_file(monkeypatch, tmp_path):
    from loguru import logger

    from testfactory.common import global_config

    log_file = tmp_path / "logs" / "testfactory.log"
    monkeypatch.setattr(global_config, "_logger_initialized", False)
    monkeypatch.setenv("LOG_FILE", str(log_file))
    GlobalConfig.reset()

    global_config.init_logger(level="debug")
    logger.info("order A-1 created")
    logger.remove()

    assert "order A-1 created" in log_file.read_text(encoding="utf-8")
    assert global_config.get_logger() is logger

from powerstat_core.config import CollectorConfig, DEFAULT_CONFIG, load_config


def test_defaults_when_file_missing(tmp_path):
    cfg = load_config(str(tmp_path / "missing.yml"))
    assert cfg == CollectorConfig()
    assert cfg.power_cache_ttl == 30.0
    assert cfg.fast_timeout == 0.5
    assert cfg.slow_timeout == 3.0
    assert cfg.sensor_max_c == 150.0


def test_loads_known_keys_from_config_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("POWERSTAT_CONFIG_DIR", str(tmp_path))
    (tmp_path / "powerstat.yml").write_text(
        "power_cache_ttl: 10\nsensor_max_c: 120\nunknown_key: 1\n"
    )
    cfg = load_config()
    assert cfg.power_cache_ttl == 10.0
    assert cfg.sensor_max_c == 120.0
    assert cfg.slow_timeout == DEFAULT_CONFIG["slow_timeout"]


def test_non_positive_timeouts_fixed():
    cfg = CollectorConfig(fast_timeout=0, slow_timeout=-1, power_cache_ttl=0)
    assert cfg.fast_timeout == 0.5
    assert cfg.slow_timeout == 3.0
    assert cfg.power_cache_ttl == 30.0


def test_invalid_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "powerstat.yml"
    path.write_text("- just\n- a list\n")
    assert load_config(str(path)) == CollectorConfig()

    path.write_text("fast_timeout: [not, a, number]\n")
    assert load_config(str(path)) == CollectorConfig()

from app.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("TEMPLATES_PROTOTYPE_INIT_DELAY_MS", "TEMPLATES_DEMO_CONTRACT_COUNT", "TEMPLATES_WAIT_FOR_INPUT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.prototype_init_delay_ms == 100
    assert settings.demo_contract_count == 5
    assert settings.wait_for_input is False


def test_env_override(monkeypatch):
    monkeypatch.setenv("TEMPLATES_PROTOTYPE_INIT_DELAY_MS", "0")
    monkeypatch.setenv("TEMPLATES_DEMO_CONTRACT_COUNT", "2")

    settings = Settings(_env_file=None)

    assert settings.prototype_init_delay_ms == 0
    assert settings.demo_contract_count == 2

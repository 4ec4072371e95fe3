from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Имитация дорогой инициализации базового шаблона
    prototype_init_delay_ms: int = Field(100, ge=0)

    # Параметры демонстрационного запуска
    demo_contract_count: int = 5
    wait_for_input: bool = False

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_prefix": "TEMPLATES_", "extra": "ignore"}

settings = Settings()

import logging


def setup_logging(level: str = "INFO") -> None:
    """Настройка логирования для консольного запуска"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

import sys
import time

from app.core.config import settings
from app.core.logging import setup_logging
from app.domains.templates import DocumentService


def main() -> int:
    """Демонстрация: эталоны строятся один раз, договоры создаются клонированием"""
    setup_logging(settings.log_level)

    print("=== Template System (Prototype) ===\n")

    service = DocumentService(settings)

    print(f"\nCreating {settings.demo_contract_count} service contracts via cloning...")
    start_time = time.perf_counter()

    for client_id in range(1, settings.demo_contract_count + 1):
        service.create_service_contract_for_client(client_id)

    elapsed = (time.perf_counter() - start_time) * 1000
    print(f"Total time: {elapsed:.3f}ms\n")

    consulting = service.create_consulting_contract_for_client(1)
    service.display_template(consulting)

    if settings.wait_for_input:
        input()

    return 0


if __name__ == "__main__":
    sys.exit(main())

from typing import Optional
from datetime import datetime
import logging
import time

from app.core.config import Settings, settings as default_settings
from app.domains.templates.entities import (
    DocumentTemplate, Section, DocumentStyle, Margins, ApprovalWorkflow
)
from app.domains.templates.schemas import ContractType, TemplateSummary

logger = logging.getLogger(__name__)

CLAUSE_SUBJECT_MARKER = "Clause 1"
CLAUSE_PRICE_MARKER = "Clause 3"


def _timestamp() -> str:
    return datetime.now().isoformat(timespec="seconds")


class DocumentService:
    """Фабрика договоров на основе эталонных шаблонов (прототипов)"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

        # Дорогая инициализация выполняется один раз на экземпляр сервиса
        self._service_contract_prototype = self._create_base_service_contract()
        self._consulting_contract_prototype = self._derive_consulting_contract(
            self._service_contract_prototype
        )

    def _create_base_service_contract(self) -> DocumentTemplate:
        """Построение базового шаблона договора оказания услуг"""
        logger.info("Initializing prototype: service contract (one time only)")
        time.sleep(self.settings.prototype_init_delay_ms / 1000)

        template = DocumentTemplate(
            title="Service Agreement",
            category="Contracts",
            style=DocumentStyle(
                font_family="Arial",
                font_size=12,
                header_color="#003366",
                logo_url="https://company.com/logo.png",
                page_margins=Margins(top=2, bottom=2, left=3, right=3)
            ),
            workflow=ApprovalWorkflow(
                approvers=["manager@company.com", "legal@company.com"],
                required_approvals=2,
                timeout_days=5
            )
        )

        template.sections.append(Section(
            name="Clause 1 - Subject",
            content="The subject of this agreement is...",
            is_editable=True
        ))
        template.sections.append(Section(
            name="Clause 2 - Term",
            content="This agreement shall remain in force for...",
            is_editable=True
        ))
        template.sections.append(Section(
            name="Clause 3 - Price",
            content="The total price of this agreement is...",
            is_editable=True
        ))

        template.required_fields.extend(["ClientName", "TaxId", "Address"])
        template.tags.extend(["contract", "services"])

        template.metadata["Version"] = "1.0"
        template.metadata["Department"] = "Commercial"
        template.metadata["LastRevised"] = _timestamp()

        return template

    def _derive_consulting_contract(self, service_prototype: DocumentTemplate) -> DocumentTemplate:
        """Шаблон консалтингового договора как правка копии базового"""
        logger.info("Deriving prototype: consulting contract (from service contract prototype)")
        consulting = service_prototype.clone()

        consulting.title = "Consulting Agreement"
        consulting.replace_tag("services", "consulting")

        # Меняем только то, что отличается
        subject = consulting.find_section(CLAUSE_SUBJECT_MARKER)
        if subject is not None:
            subject.content = "The subject of this consulting agreement is..."

        # Для консалтинга пункт о цене не нужен
        removed = consulting.remove_sections(CLAUSE_PRICE_MARKER)
        logger.debug(f"Removed {removed} section(s) matching '{CLAUSE_PRICE_MARKER}'")

        return consulting

    def _prototype_for(self, contract_type: ContractType) -> DocumentTemplate:
        if contract_type == ContractType.SERVICE:
            return self._service_contract_prototype
        elif contract_type == ContractType.CONSULTING:
            return self._consulting_contract_prototype
        raise ValueError(f"Unsupported contract type: {contract_type}")

    def get_prototype(self, contract_type: ContractType) -> DocumentTemplate:
        """Копия эталонного шаблона; сами эталоны наружу не отдаются"""
        return self._prototype_for(contract_type).clone()

    def create_contract_for_client(self, contract_type: ContractType, client_id: int) -> DocumentTemplate:
        """Создание договора для клиента клонированием эталона"""
        if contract_type == ContractType.SERVICE:
            return self.create_service_contract_for_client(client_id)
        elif contract_type == ContractType.CONSULTING:
            return self.create_consulting_contract_for_client(client_id)
        raise ValueError(f"Unsupported contract type: {contract_type}")

    def create_service_contract_for_client(self, client_id: int) -> DocumentTemplate:
        doc = self._service_contract_prototype.clone()
        doc.title = f"Contract #{client_id} - Client {client_id}"
        self._stamp_client(doc, client_id)
        logger.debug(f"Created service contract for client {client_id}")
        return doc

    def create_consulting_contract_for_client(self, client_id: int) -> DocumentTemplate:
        doc = self._consulting_contract_prototype.clone()
        doc.title = f"Consulting Contract #{client_id} - Client {client_id}"
        self._stamp_client(doc, client_id)
        logger.debug(f"Created consulting contract for client {client_id}")
        return doc

    @staticmethod
    def _stamp_client(doc: DocumentTemplate, client_id: int) -> None:
        doc.metadata["ClientId"] = str(client_id)
        doc.metadata["GeneratedAt"] = _timestamp()

    def summarize_template(self, template: DocumentTemplate) -> TemplateSummary:
        """Сводка по шаблону (только чтение)"""
        return TemplateSummary(
            title=template.title,
            category=template.category,
            section_count=len(template.sections),
            required_fields=list(template.required_fields),
            approvers=list(template.workflow.approvers) if template.workflow is not None else [],
            tags=list(template.tags)
        )

    def render_template(self, template: DocumentTemplate) -> str:
        return self.summarize_template(template).render()

    def display_template(self, template: DocumentTemplate) -> str:
        """Вывод сводки по шаблону в stdout"""
        text = self.render_template(template)
        print(text)
        return text

from app.domains.templates.entities import (
    Margins, ApprovalWorkflow, DocumentStyle, Section, DocumentTemplate
)
from app.domains.templates.schemas import ContractType, TemplateSummary
from app.domains.templates.services import DocumentService

__all__ = [
    "Margins", "ApprovalWorkflow", "DocumentStyle", "Section", "DocumentTemplate",
    "ContractType", "TemplateSummary",
    "DocumentService"
]

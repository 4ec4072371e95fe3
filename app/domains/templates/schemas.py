from pydantic import BaseModel, ConfigDict, Field
from typing import List
from enum import Enum


class ContractType(str, Enum):
    """Типы договоров, для которых есть эталонные шаблоны"""
    SERVICE = "service"
    CONSULTING = "consulting"


class TemplateSummary(BaseModel):
    """Краткая сводка по шаблону для вывода"""
    title: str
    category: str
    section_count: int = Field(..., ge=0)
    required_fields: List[str] = []
    approvers: List[str] = []
    tags: List[str] = []

    model_config = ConfigDict(from_attributes=True, frozen=True)

    def render(self) -> str:
        lines = [
            "",
            f"=== {self.title} ===",
            f"Category: {self.category}",
            f"Sections: {self.section_count}",
            f"Required fields: {', '.join(self.required_fields)}",
            f"Approvers: {', '.join(self.approvers)}",
            f"Tags: {', '.join(self.tags)}",
        ]
        return "\n".join(lines)

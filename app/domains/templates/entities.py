from typing import Optional, List, Dict


class Margins:
    """Поля страницы документа"""

    def __init__(self, top: int = 0, bottom: int = 0, left: int = 0, right: int = 0):
        self.top = top
        self.bottom = bottom
        self.left = left
        self.right = right

    def clone(self) -> "Margins":
        return Margins(
            top=self.top,
            bottom=self.bottom,
            left=self.left,
            right=self.right
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Margins):
            return False
        return (
            self.top == other.top
            and self.bottom == other.bottom
            and self.left == other.left
            and self.right == other.right
        )

    def __repr__(self) -> str:
        return f"Margins(top={self.top}, bottom={self.bottom}, left={self.left}, right={self.right})"


class ApprovalWorkflow:
    """Процесс согласования документа"""

    def __init__(
        self,
        approvers: Optional[List[str]] = None,
        required_approvals: int = 0,
        timeout_days: int = 0
    ):
        # required_approvals может превышать число согласующих, это не проверяется
        self.approvers = approvers if approvers is not None else []
        self.required_approvals = required_approvals
        self.timeout_days = timeout_days

    def clone(self) -> "ApprovalWorkflow":
        """Копия с собственным списком согласующих"""
        return ApprovalWorkflow(
            approvers=list(self.approvers),
            required_approvals=self.required_approvals,
            timeout_days=self.timeout_days
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, ApprovalWorkflow):
            return False
        return (
            self.approvers == other.approvers
            and self.required_approvals == other.required_approvals
            and self.timeout_days == other.timeout_days
        )

    def __repr__(self) -> str:
        return (
            f"ApprovalWorkflow(approvers={self.approvers}, "
            f"required_approvals={self.required_approvals}, timeout_days={self.timeout_days})"
        )


class DocumentStyle:
    """Оформление документа"""

    def __init__(
        self,
        font_family: str = "",
        font_size: int = 12,
        header_color: str = "",
        logo_url: str = "",
        page_margins: Optional[Margins] = None
    ):
        self.font_family = font_family
        self.font_size = font_size
        self.header_color = header_color
        self.logo_url = logo_url
        self.page_margins = page_margins

    def clone(self) -> "DocumentStyle":
        return DocumentStyle(
            font_family=self.font_family,
            font_size=self.font_size,
            header_color=self.header_color,
            logo_url=self.logo_url,
            page_margins=self.page_margins.clone() if self.page_margins is not None else None
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, DocumentStyle):
            return False
        return (
            self.font_family == other.font_family
            and self.font_size == other.font_size
            and self.header_color == other.header_color
            and self.logo_url == other.logo_url
            and self.page_margins == other.page_margins
        )

    def __repr__(self) -> str:
        return f"DocumentStyle(font_family={self.font_family}, font_size={self.font_size})"


class Section:
    """Раздел шаблона (например, пункт договора)"""

    def __init__(
        self,
        name: str,
        content: str = "",
        is_editable: bool = False,
        placeholders: Optional[List[str]] = None
    ):
        self.name = name
        self.content = content
        self.is_editable = is_editable
        self.placeholders = placeholders if placeholders is not None else []

    def matches(self, marker: str) -> bool:
        """Поиск раздела по вхождению подстроки в название"""
        return marker in self.name

    def clone(self) -> "Section":
        return Section(
            name=self.name,
            content=self.content,
            is_editable=self.is_editable,
            placeholders=list(self.placeholders)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Section):
            return False
        return (
            self.name == other.name
            and self.content == other.content
            and self.is_editable == other.is_editable
            and self.placeholders == other.placeholders
        )

    def __repr__(self) -> str:
        return f"Section(name={self.name}, is_editable={self.is_editable})"


class DocumentTemplate:
    """Шаблон документа. Все вложенные объекты принадлежат только этому шаблону"""

    def __init__(
        self,
        title: str,
        category: str = "",
        sections: Optional[List[Section]] = None,
        style: Optional[DocumentStyle] = None,
        required_fields: Optional[List[str]] = None,
        metadata: Optional[Dict[str, str]] = None,
        workflow: Optional[ApprovalWorkflow] = None,
        tags: Optional[List[str]] = None
    ):
        self.title = title
        self.category = category
        self.sections = sections if sections is not None else []
        self.style = style
        self.required_fields = required_fields if required_fields is not None else []
        self.metadata = metadata if metadata is not None else {}
        self.workflow = workflow
        self.tags = tags if tags is not None else []

    def clone(self) -> "DocumentTemplate":
        """Глубокая копия: ни одна ссылка не разделяется с исходным шаблоном"""
        return DocumentTemplate(
            title=self.title,
            category=self.category,
            sections=[section.clone() for section in self.sections],
            style=self.style.clone() if self.style is not None else None,
            required_fields=list(self.required_fields),
            metadata=dict(self.metadata),
            workflow=self.workflow.clone() if self.workflow is not None else None,
            tags=list(self.tags)
        )

    def find_section(self, marker: str) -> Optional[Section]:
        """Первый раздел, название которого содержит marker"""
        return next((s for s in self.sections if s.matches(marker)), None)

    def remove_sections(self, marker: str) -> int:
        """Удаление всех разделов, название которых содержит marker"""
        kept = [s for s in self.sections if not s.matches(marker)]
        removed = len(self.sections) - len(kept)
        self.sections = kept
        return removed

    def replace_tag(self, old_tag: str, new_tag: str) -> None:
        """Удаление первого вхождения old_tag и добавление new_tag в конец"""
        if old_tag in self.tags:
            self.tags.remove(old_tag)
        self.tags.append(new_tag)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DocumentTemplate):
            return False
        return (
            self.title == other.title
            and self.category == other.category
            and self.sections == other.sections
            and self.style == other.style
            and self.required_fields == other.required_fields
            and self.metadata == other.metadata
            and self.workflow == other.workflow
            and self.tags == other.tags
        )

    def __repr__(self) -> str:
        return f"DocumentTemplate(title={self.title}, category={self.category}, sections={len(self.sections)})"

"""
Pytest configuration and shared fixtures for contract template tests.
"""
import pytest

from app.core.config import Settings
from app.domains.templates import (
    DocumentService, DocumentTemplate, Section, DocumentStyle, Margins, ApprovalWorkflow
)


# ============================================================================
# Fixtures: Configuration & Service
# ============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings without the simulated initialization delay."""
    return Settings(prototype_init_delay_ms=0, demo_contract_count=3, wait_for_input=False)


@pytest.fixture
def service(test_settings) -> DocumentService:
    return DocumentService(test_settings)


# ============================================================================
# Fixtures: Sample Data
# ============================================================================

@pytest.fixture
def sample_template() -> DocumentTemplate:
    """A fully populated template with every optional part present."""
    return DocumentTemplate(
        title="Lease Agreement",
        category="Contracts",
        sections=[
            Section(
                name="Clause 1 - Parties",
                content="Between {landlord} and {tenant}",
                is_editable=True,
                placeholders=["landlord", "tenant"],
            ),
            Section(name="Clause 2 - Rent", content="Monthly rent is {amount}", placeholders=["amount"]),
        ],
        style=DocumentStyle(
            font_family="Times New Roman",
            font_size=11,
            header_color="#112233",
            logo_url="https://example.com/logo.png",
            page_margins=Margins(top=1, bottom=1, left=2, right=2),
        ),
        required_fields=["Landlord", "Tenant"],
        metadata={"Version": "2.1"},
        workflow=ApprovalWorkflow(approvers=["a@example.com", "a@example.com"], required_approvals=1, timeout_days=3),
        tags=["lease", "property"],
    )

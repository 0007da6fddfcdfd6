"""Search hit presentation: titles, descriptions, links, byte formatting."""

import pytest

from app.application.services.search_presentation import (
    claim_to_hit,
    document_to_hit,
    format_bytes,
    policy_to_hit,
)
from app.domain.enums import ClaimStatus, DocumentType, RecordKind
from tests.factories import make_claim, make_document, make_policy, ts


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0 Bytes"),
        (500, "500 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (2457600, "2.34 MB"),
        (1024**3, "1 GB"),
        (5 * 1024**4, "5 TB"),
    ],
)
def test_format_bytes(size: int, expected: str) -> None:
    assert format_bytes(size) == expected


def test_policy_hit_uses_description_and_last_modified() -> None:
    policy = make_policy(updated_at=ts(2023, 6, 1), created_at=ts(2023, 1, 1))
    hit = policy_to_hit(policy)
    assert hit.kind == RecordKind.POLICY
    assert hit.title == "Policy #HOME-2023-001"
    assert hit.description == "Primary residence cover including water damage"
    assert hit.link == "/policies/policy-1"
    assert hit.last_modified == ts(2023, 6, 1)


def test_policy_hit_falls_back_to_provider_and_type() -> None:
    hit = policy_to_hit(make_policy(description=None))
    assert hit.description == "Insurance Co - HOME"


def test_claim_hit_short_description_has_status_suffix() -> None:
    hit = claim_to_hit(make_claim(description="Cracked window", status=ClaimStatus.PAID))
    assert hit.title == "Claim #CLM-1001"
    assert hit.description == "Cracked window - PAID"
    assert hit.link == "/claims/claim-1"


def test_claim_hit_truncates_long_description() -> None:
    hit = claim_to_hit(make_claim(description="x" * 120))
    assert hit.description == "x" * 100 + "... - SUBMITTED"


def test_claim_hit_exactly_preview_length_is_not_truncated() -> None:
    hit = claim_to_hit(make_claim(description="y" * 100))
    assert hit.description == "y" * 100 + " - SUBMITTED"


def test_document_hit_uses_file_name_as_title() -> None:
    hit = document_to_hit(make_document())
    assert hit.kind == RecordKind.DOCUMENT
    assert hit.title == "kitchen-ceiling.jpg"
    assert hit.description == "Photo of the damage above the sink"
    assert hit.link == "/documents/document-1"


def test_document_hit_falls_back_to_type_and_size() -> None:
    hit = document_to_hit(
        make_document(description=None, document_type=DocumentType.INVOICE, file_size=1024)
    )
    assert hit.description == "INVOICE - 1 KB"

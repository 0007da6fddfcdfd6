"""Record builders shared by unit, integration and API tests.

SCENARIO is the three-kind fixture: for user-1, policy-1, claim-1 and
document-1 all mention "damage" and were last modified on consecutive days.
"""

from dataclasses import replace
from datetime import UTC, datetime

from app.application.dtos.claim import ClaimResult
from app.application.dtos.document import DocumentResult
from app.application.dtos.policy import PolicyResult
from app.domain.enums import ClaimStatus, DocumentType

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


def ts(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=UTC)


def make_policy(**overrides) -> PolicyResult:
    policy = PolicyResult(
        id="policy-1",
        user_id=USER_ID,
        policy_number="HOME-2023-001",
        provider="Insurance Co",
        insurance_type="HOME",
        description="Primary residence cover including water damage",
        coverage_amount=250000.0,
        premium=1200.0,
        start_date=ts(2023, 1, 1),
        end_date=ts(2024, 1, 1),
        is_active=True,
        created_at=ts(2023, 1, 1),
        updated_at=ts(2023, 1, 1),
    )
    return replace(policy, **overrides)


def make_claim(**overrides) -> ClaimResult:
    claim = ClaimResult(
        id="claim-1",
        user_id=USER_ID,
        policy_id="policy-1",
        claim_number="CLM-1001",
        status=ClaimStatus.SUBMITTED,
        incident_date=ts(2022, 12, 24),
        description="Burst pipe caused water damage to the kitchen ceiling",
        damage_amount=8200.0,
        approved_amount=None,
        created_at=ts(2023, 1, 2),
        updated_at=ts(2023, 1, 2),
    )
    return replace(claim, **overrides)


def make_document(**overrides) -> DocumentResult:
    document = DocumentResult(
        id="document-1",
        user_id=USER_ID,
        policy_id="policy-1",
        claim_id="claim-1",
        file_name="kitchen-ceiling.jpg",
        file_size=2457600,
        mime_type="image/jpeg",
        document_type=DocumentType.PHOTO,
        description="Photo of the damage above the sink",
        upload_date=ts(2023, 1, 3),
        is_analyzed=True,
        created_at=ts(2023, 1, 3),
        updated_at=ts(2023, 1, 3),
    )
    return replace(document, **overrides)


def scenario_policies() -> list[PolicyResult]:
    return [
        make_policy(),
        make_policy(
            id="policy-2",
            policy_number="AUTO-2023-014",
            provider="Road Mutual",
            insurance_type="AUTO",
            description=None,
            coverage_amount=40000.0,
            premium=650.5,
            start_date=ts(2023, 3, 1),
            end_date=ts(2024, 3, 1),
            created_at=ts(2023, 3, 1),
            updated_at=ts(2023, 3, 5),
        ),
        make_policy(
            id="policy-3",
            user_id=OTHER_USER_ID,
            policy_number="HOME-2023-777",
            provider="Shield Partners",
            description="Flat with storm damage rider",
            coverage_amount=180000.0,
            is_active=False,
            updated_at=ts(2023, 2, 1),
        ),
    ]


def scenario_claims() -> list[ClaimResult]:
    return [
        make_claim(),
        make_claim(
            id="claim-2",
            policy_id="policy-2",
            claim_number="CLM-1002",
            status=ClaimStatus.APPROVED,
            incident_date=ts(2023, 4, 10),
            description="Rear bumper replaced after parking incident",
            damage_amount=1500.0,
            approved_amount=1350.0,
            created_at=ts(2023, 4, 11),
            updated_at=ts(2023, 4, 20),
        ),
        make_claim(
            id="claim-3",
            user_id=OTHER_USER_ID,
            policy_id="policy-3",
            claim_number="CLM-2001",
            status=ClaimStatus.APPROVED,
            description="Storm damage to roof tiles",
            updated_at=ts(2023, 2, 2),
        ),
    ]


def scenario_documents() -> list[DocumentResult]:
    return [
        make_document(),
        make_document(
            id="document-2",
            policy_id="policy-2",
            claim_id="claim-2",
            file_name="bumper_invoice.pdf",
            file_size=1024,
            mime_type="application/pdf",
            document_type=DocumentType.INVOICE,
            description=None,
            upload_date=ts(2023, 4, 15),
            is_analyzed=False,
            created_at=ts(2023, 4, 15),
            updated_at=ts(2023, 4, 15),
        ),
        make_document(
            id="document-3",
            user_id=OTHER_USER_ID,
            policy_id="policy-3",
            claim_id="claim-3",
            file_name="roof.jpg",
            description="Damage photo",
            updated_at=ts(2023, 2, 3),
        ),
    ]

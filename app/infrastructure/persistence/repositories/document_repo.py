"""Document repository. Rows carry the parent policy number and claim number."""

from __future__ import annotations

from sqlalchemy import Row, Select, select

from app.application.dtos.document import DocumentResult
from app.infrastructure.persistence.models.claim import Claim
from app.infrastructure.persistence.models.document import Document
from app.infrastructure.persistence.models.policy import InsurancePolicy
from app.infrastructure.persistence.repositories.record_repo import SqlRecordRepository
from app.shared.utils.datetime import ensure_utc


def _document_to_result(
    d: Document, policy_number: str | None, claim_number: str | None
) -> DocumentResult:
    """Map ORM Document (plus joined parent numbers) to application DocumentResult."""
    return DocumentResult(
        id=d.id,
        user_id=d.user_id,
        policy_id=d.policy_id,
        claim_id=d.claim_id,
        file_name=d.file_name,
        file_size=d.file_size,
        mime_type=d.mime_type,
        document_type=d.document_type,
        description=d.description,
        upload_date=ensure_utc(d.upload_date),
        is_analyzed=d.is_analyzed,
        created_at=ensure_utc(d.created_at),
        updated_at=ensure_utc(d.updated_at),
        policy_number=policy_number,
        claim_number=claim_number,
    )


class DocumentRepository(SqlRecordRepository[Document, DocumentResult]):
    """Document partition of the record store (read-only)."""

    model = Document
    queryable_fields = frozenset({
        "id", "user_id", "policy_id", "claim_id", "file_name", "file_size",
        "mime_type", "document_type", "description", "upload_date", "is_analyzed",
        "created_at", "updated_at",
    })

    def _base_select(self) -> Select:
        return (
            select(Document, InsurancePolicy.policy_number, Claim.claim_number)
            .outerjoin(InsurancePolicy, Document.policy_id == InsurancePolicy.id)
            .outerjoin(Claim, Document.claim_id == Claim.id)
        )

    def _to_result(self, row: Row) -> DocumentResult:
        document, policy_number, claim_number = row
        return _document_to_result(document, policy_number, claim_number)

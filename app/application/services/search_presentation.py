"""Turn policy, claim and document records into display-ready search hits."""

from __future__ import annotations

from app.application.dtos.claim import ClaimResult
from app.application.dtos.document import DocumentResult
from app.application.dtos.policy import PolicyResult
from app.application.dtos.search import SearchResultItem
from app.domain.enums import RecordKind

CLAIM_DESCRIPTION_PREVIEW = 100

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")


def format_bytes(size: int, decimals: int = 2) -> str:
    """Human readable size in 1024-based units (e.g. 1536 -> "1.5 KB")."""
    if size <= 0:
        return "0 Bytes"
    decimals = max(decimals, 0)
    exponent = 0
    while size >= 1024 ** (exponent + 1) and exponent < len(_SIZE_UNITS) - 1:
        exponent += 1
    value = round(size / 1024**exponent, decimals)
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {_SIZE_UNITS[exponent]}"


def _enum_text(value: object) -> str:
    return str(getattr(value, "value", value))


def policy_to_hit(policy: PolicyResult) -> SearchResultItem:
    description = policy.description or f"{policy.provider} - {policy.insurance_type}"
    return SearchResultItem(
        id=policy.id,
        kind=RecordKind.POLICY,
        title=f"Policy #{policy.policy_number}",
        description=description,
        last_modified=policy.updated_at,
        link=f"/policies/{policy.id}",
    )


def claim_to_hit(claim: ClaimResult) -> SearchResultItem:
    preview = claim.description[:CLAIM_DESCRIPTION_PREVIEW]
    if len(claim.description) > CLAIM_DESCRIPTION_PREVIEW:
        preview += "..."
    return SearchResultItem(
        id=claim.id,
        kind=RecordKind.CLAIM,
        title=f"Claim #{claim.claim_number}",
        description=f"{preview} - {_enum_text(claim.status)}",
        last_modified=claim.updated_at,
        link=f"/claims/{claim.id}",
    )


def document_to_hit(document: DocumentResult) -> SearchResultItem:
    description = document.description or (
        f"{_enum_text(document.document_type)} - {format_bytes(document.file_size)}"
    )
    return SearchResultItem(
        id=document.id,
        kind=RecordKind.DOCUMENT,
        title=document.file_name,
        description=description,
        last_modified=document.updated_at,
        link=f"/documents/{document.id}",
    )

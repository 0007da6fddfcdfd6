"""Free-text query tokenization and keyword inference.

Tokenizing splits on whitespace runs. Keyword inference maps terms to enum
values of kind-specific fields (claim status, document category) so that a
query like "approved" also finds approved claims whose text never says so.
Inference only ever widens a kind's result set: the inferred condition is
OR'd with the text match, never AND'd.
"""

from __future__ import annotations

from typing import TypeVar

from app.domain.enums import ClaimStatus, DocumentType

E = TypeVar("E")

# Ordered: for a term containing several keywords the first entry wins.
CLAIM_STATUS_KEYWORDS: tuple[tuple[str, ClaimStatus], ...] = (
    ("approved", ClaimStatus.APPROVED),
    ("rejected", ClaimStatus.REJECTED),
    ("paid", ClaimStatus.PAID),
    ("draft", ClaimStatus.DRAFT),
    ("submitted", ClaimStatus.SUBMITTED),
    ("review", ClaimStatus.UNDER_REVIEW),
    ("closed", ClaimStatus.CLOSED),
)

DOCUMENT_TYPE_KEYWORDS: tuple[tuple[str, DocumentType], ...] = (
    ("policy", DocumentType.POLICY),
    ("claim", DocumentType.CLAIM),
    ("identity", DocumentType.IDENTITY),
    ("proof", DocumentType.PROOF_OF_LOSS),
    ("estimate", DocumentType.ESTIMATE),
    ("invoice", DocumentType.INVOICE),
    ("receipt", DocumentType.RECEIPT),
    ("photo", DocumentType.PHOTO),
)


def tokenize(free_text: str | None) -> list[str]:
    """Split on whitespace runs; drop empties. Order and duplicates are kept."""
    if not free_text:
        return []
    return free_text.split()


def infer_values(terms: list[str], table: tuple[tuple[str, E], ...]) -> list[E]:
    """Map each term to the first keyword it contains (case-insensitive).

    Terms without a keyword contribute nothing. The result is de-duplicated
    in first-seen order.
    """
    inferred: list[E] = []
    for term in terms:
        lowered = term.lower()
        for keyword, value in table:
            if keyword in lowered:
                if value not in inferred:
                    inferred.append(value)
                break
    return inferred


def infer_claim_statuses(terms: list[str]) -> list[ClaimStatus]:
    """Claim statuses named by the terms (e.g. "approved" -> APPROVED)."""
    return infer_values(terms, CLAIM_STATUS_KEYWORDS)


def infer_document_types(terms: list[str]) -> list[DocumentType]:
    """Document categories named by the terms (e.g. "receipts" -> RECEIPT)."""
    return infer_values(terms, DOCUMENT_TYPE_KEYWORDS)

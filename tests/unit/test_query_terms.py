"""Tokenizer and keyword inference tests."""

from app.application.services.query_terms import (
    infer_claim_statuses,
    infer_document_types,
    tokenize,
)
from app.domain.enums import ClaimStatus, DocumentType


def test_tokenize_splits_on_whitespace_runs() -> None:
    assert tokenize("  water \t damage\nkitchen  ") == ["water", "damage", "kitchen"]


def test_tokenize_keeps_order_and_duplicates() -> None:
    assert tokenize("b a b") == ["b", "a", "b"]


def test_tokenize_blank_input_has_no_terms() -> None:
    assert tokenize("") == []
    assert tokenize("   \t\n ") == []
    assert tokenize(None) == []


def test_infer_claim_status_from_keyword() -> None:
    assert infer_claim_statuses(["approved"]) == [ClaimStatus.APPROVED]


def test_infer_claim_status_is_case_insensitive_substring() -> None:
    """Keywords match inside longer terms regardless of case."""
    assert infer_claim_statuses(["PRE-APPROVED"]) == [ClaimStatus.APPROVED]
    assert infer_claim_statuses(["reviewing"]) == [ClaimStatus.UNDER_REVIEW]


def test_infer_claim_statuses_deduplicates_in_first_seen_order() -> None:
    terms = ["paid", "closed", "unpaid", "water"]
    assert infer_claim_statuses(terms) == [ClaimStatus.PAID, ClaimStatus.CLOSED]


def test_infer_nothing_for_plain_terms() -> None:
    assert infer_claim_statuses(["water", "damage"]) == []
    assert infer_document_types(["water", "damage"]) == []


def test_infer_document_type_first_keyword_in_table_order_wins() -> None:
    """A term holding two keywords maps to the earlier table entry only."""
    assert infer_document_types(["policy-claim"]) == [DocumentType.POLICY]
    assert infer_document_types(["claim-policy"]) == [DocumentType.POLICY]


def test_infer_document_types_for_each_keyword() -> None:
    terms = ["receipts", "proof", "estimate", "invoice", "photos", "identity"]
    assert infer_document_types(terms) == [
        DocumentType.RECEIPT,
        DocumentType.PROOF_OF_LOSS,
        DocumentType.ESTIMATE,
        DocumentType.INVOICE,
        DocumentType.PHOTO,
        DocumentType.IDENTITY,
    ]

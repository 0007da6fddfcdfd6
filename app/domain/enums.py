"""Domain enumerations for the PolicyVault application.

Enums represent fixed sets of domain values (record kinds, claim status,
document category).
"""

from enum import Enum


class RecordKind(str, Enum):
    """Searchable record category.

    Declaration order is the fan-out order of global search and therefore
    the tie-break order when two results share a last-modified time.
    """

    POLICY = "policy"
    CLAIM = "claim"
    DOCUMENT = "document"

    @classmethod
    def parse_list(cls, raw: str | None) -> list["RecordKind"]:
        """Parse a comma list of kinds; unknown tokens are dropped.

        An empty or missing list (or one with no known tokens) means all kinds.
        Duplicates are collapsed and declaration order is kept.
        """
        if not raw:
            return list(cls)
        wanted = {token.strip().lower() for token in raw.split(",")}
        kinds = [kind for kind in cls if kind.value in wanted]
        return kinds or list(cls)


class ClaimStatus(str, Enum):
    """Claim lifecycle status."""

    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    UNDER_REVIEW = "UNDER_REVIEW"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    PAID = "PAID"
    CLOSED = "CLOSED"


class DocumentType(str, Enum):
    """Supporting document category."""

    POLICY = "POLICY"
    CLAIM = "CLAIM"
    IDENTITY = "IDENTITY"
    PROOF_OF_LOSS = "PROOF_OF_LOSS"
    ESTIMATE = "ESTIMATE"
    INVOICE = "INVOICE"
    RECEIPT = "RECEIPT"
    PHOTO = "PHOTO"
    OTHER = "OTHER"

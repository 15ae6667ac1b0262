"""Domain schemas. Inbound patch-result validation."""

from rewrite_provenance.domain.schemas.patch_result import (
    PatchResultBundle,
    PatchResultEntry,
    PatchResponse,
    outcomes_from_bundles,
)

__all__ = [
    "PatchResponse",
    "PatchResultBundle",
    "PatchResultEntry",
    "outcomes_from_bundles",
]

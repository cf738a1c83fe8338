from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lyrics_resolver.sources.service import Failure


class ResolverError(RuntimeError):
    status_code = 500

    def to_dict(self) -> dict[str, Any]:
        return {"error": str(self)}


class ValidationError(ResolverError):
    status_code = 400


class NotFoundAfterExhaustion(ResolverError):
    status_code = 404

    def __init__(self, failure: Failure):
        super().__init__(
            "Lyrics not found for this track. The song might not be in any of the databases, "
            "or the track/artist names might not match. "
            "Try searching with just the main song name and artist."
        )
        self.failure = failure

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["tried"] = self.failure.variants.to_dict()
        out["attempts"] = len(self.failure.attempts)
        if self.failure.budget_exhausted:
            out["budgetExhausted"] = True
        return out

"""Supabase repository for AI meal requests."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.ai_meals import AIMealRequest, AIMealResult
from macro_tracker.services.ai_meals import AIMealRequestRepository

_COLUMNS = "id, user_id, prompt, result, saved, source, created_at"


@dataclass
class SupabaseAIMealRequestRepository(AIMealRequestRepository):
    """Supabase implementation for AI meal requests."""

    client: Client

    def create_request(
        self,
        user_id: UUID,
        prompt: str,
        result: AIMealResult | None,
        source: str | None,
    ) -> AIMealRequest:
        """Store a request row and return it."""
        response = (
            self.client.table("ai_meal_requests")
            .insert(
                {
                    "user_id": str(user_id),
                    "prompt": prompt,
                    "result": result.model_dump() if result else None,
                    "saved": False,
                    "source": source,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create AI meal request")
        return _parse_request(response.data[0])

    def get_request(self, request_id: UUID) -> AIMealRequest | None:
        """Return a request by id."""
        response = (
            self.client.table("ai_meal_requests")
            .select(_COLUMNS)
            .eq("id", str(request_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_request(response.data[0])

    def list_requests(self, user_id: UUID) -> list[AIMealRequest]:
        """Return the user's requests, oldest first."""
        response = (
            self.client.table("ai_meal_requests")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_request(row) for row in response.data or []]

    def mark_saved(self, request_id: UUID) -> AIMealRequest | None:
        """Flag a request as saved."""
        response = (
            self.client.table("ai_meal_requests")
            .update({"saved": True})
            .eq("id", str(request_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_request(response.data[0])


def _parse_request(row: dict[str, object]) -> AIMealRequest:
    result_raw = row.get("result")
    created_at_raw = row.get("created_at")
    return AIMealRequest(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        prompt=str(row.get("prompt", "")),
        result=AIMealResult.model_validate(result_raw) if result_raw else None,
        saved=bool(row.get("saved", False)),
        source=row.get("source"),
        created_at=(
            datetime.fromisoformat(created_at_raw)
            if isinstance(created_at_raw, str) and created_at_raw
            else None
        ),
    )

"""Supabase repository for health readings."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from health_track.calculators.classifier import parse_glucose_context
from health_track.domain.metrics import MetricKind, MetricReading, Provenance
from health_track.services.health import MetricRepository

_COLUMNS = "kind, value, recorded_at, provenance, context, unit"


@dataclass
class SupabaseMetricRepository(MetricRepository):
    """Supabase implementation for append-only health readings."""

    client: Client

    def add_reading(self, user_id: UUID, reading: MetricReading) -> None:
        """Insert a reading row."""
        self.client.table("health_metrics").insert(
            {
                "user_id": str(user_id),
                "kind": reading.kind.value,
                "value": reading.value,
                "recorded_at": reading.recorded_at.isoformat(),
                "provenance": reading.provenance.value,
                "context": reading.context.value if reading.context else None,
                "unit": reading.resolved_unit,
            }
        ).execute()

    def list_readings(
        self, user_id: UUID, kind: MetricKind, start: datetime, end: datetime
    ) -> list[MetricReading]:
        """Return readings of a kind in the time range, oldest first."""
        response = (
            self.client.table("health_metrics")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("kind", kind.value)
            .gte("recorded_at", start.isoformat())
            .lt("recorded_at", end.isoformat())
            .order("recorded_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def latest_reading(self, user_id: UUID, kind: MetricKind) -> MetricReading | None:
        """Return the most recent reading of a kind."""
        response = (
            self.client.table("health_metrics")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("kind", kind.value)
            .order("recorded_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> MetricReading:
    context = row.get("context")
    return MetricReading(
        kind=MetricKind(str(row["kind"])),
        value=float(row.get("value", 0.0)),
        recorded_at=datetime.fromisoformat(str(row["recorded_at"])),
        provenance=Provenance(str(row.get("provenance") or Provenance.MANUAL)),
        context=parse_glucose_context(str(context)) if context else None,
        unit=str(row["unit"]) if row.get("unit") else None,
    )

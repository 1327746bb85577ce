"""Supabase repository for fridge contents."""

from collections.abc import Sequence
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from foodnager.domain.matching import FridgeEntry, UnitReference
from foodnager.services.discovery import FridgeRepository

_FRIDGE_COLUMNS = (
    "id, product_id, quantity, unit_id, expiry_date, created_at, "
    "products!inner(id, name), units!inner(id, name, abbreviation)"
)


@dataclass
class SupabaseFridgeRepository(FridgeRepository):
    """Supabase-backed repository for the user_products table."""

    client: Client

    def list_fridge_items(self, user_id: UUID) -> list[FridgeEntry]:
        """Return every item in the user's fridge."""
        response = (
            self.client.table("user_products")
            .select(_FRIDGE_COLUMNS)
            .eq("user_id", str(user_id))
            .execute()
        )
        return [_parse_fridge_item(row) for row in response.data or []]

    def list_fridge_items_for_products(
        self, user_id: UUID, product_ids: Sequence[int]
    ) -> list[FridgeEntry]:
        """Return fridge items for the given product ids."""
        response = (
            self.client.table("user_products")
            .select(_FRIDGE_COLUMNS)
            .eq("user_id", str(user_id))
            .in_("product_id", list(product_ids))
            .execute()
        )
        return [_parse_fridge_item(row) for row in response.data or []]


def _parse_fridge_item(row: dict[str, object]) -> FridgeEntry:
    units = row.get("units") or {}
    return FridgeEntry(
        product_id=int(row["product_id"]),
        quantity=float(row.get("quantity", 0.0)),
        unit=UnitReference(
            id=int(row["unit_id"]),
            name=str(units.get("name", "")),
            abbreviation=str(units.get("abbreviation", "")),
        ),
    )

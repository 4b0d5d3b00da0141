"""Seating capacity derived from table inventory."""

from typing import Any, Iterable, Mapping, Optional, Union

from domain.models import CustomTable, TableInventory


STANDARD_TABLE_SIZES = {
    "size2": 2,
    "size4": 4,
    "size6": 6,
    "size8": 8,
}


def _as_mapping(value: Union[TableInventory, CustomTable, Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(value, (TableInventory, CustomTable)):
        return value.to_document()
    return value


def theoretical_capacity(
    tables: Optional[Union[TableInventory, Mapping[str, Any]]] = None,
    custom_tables: Optional[Iterable[Union[CustomTable, Mapping[str, Any]]]] = None,
) -> int:
    """
    Seats available from the table inventory.

    Σ(standard size × count) + Σ(custom size × custom count), integer
    arithmetic only so client-side previews match exactly.

    Args:
        tables: Standard table counts (size2/size4/size6/size8)
        custom_tables: Custom sizes as {taille, nombre}

    Returns:
        Theoretical capacity in seats
    """
    total = 0

    if tables:
        counts = _as_mapping(tables)
        for key, seats in STANDARD_TABLE_SIZES.items():
            total += seats * int(counts.get(key) or 0)

    for custom in custom_tables or []:
        entry = _as_mapping(custom)
        total += int(entry.get("taille") or 0) * int(entry.get("nombre") or 0)

    return total

"""Free-text filtering and id lookup over the molecule collection."""
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from .constants import SEARCH_FIELDS


def _field_text(record: Any, field: str) -> str:
    if isinstance(record, Mapping):
        value = record.get(field)
    else:
        value = getattr(record, field, None)
    return value if isinstance(value, str) else ''


def filter_molecules(query: Optional[str], collection: Iterable[Any]) -> List[Any]:
    """
    Return the records whose name, SMILES, id or formula contains ``query``.

    Matching is case-insensitive and keeps the collection order. A blank query
    returns everything.
    """
    records = list(collection)
    if not isinstance(query, str) or not query.strip():
        return records

    needle = query.strip().lower()
    return [
        record for record in records
        if any(needle in _field_text(record, field).lower() for field in SEARCH_FIELDS)
    ]


def resolve_molecule(molecule_id: Optional[str], collection: Iterable[Any]) -> Optional[Any]:
    """Exact id lookup; ``None`` means not found (stale link, replaced dataset)."""
    if molecule_id is None:
        return None
    for record in collection:
        if _field_text(record, 'id') == molecule_id:
            return record
    return None


def count_permeable(collection: Iterable[Any]) -> int:
    """Number of records predicted to cross the blood-brain barrier."""
    return sum(1 for record in collection if getattr(record, 'is_permeable', False))

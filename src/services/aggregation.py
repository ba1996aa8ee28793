"""Read-only joins between checklist rows and catalog names.

These functions never touch the database. They take plain mappings and return
new dicts, so the checklist and catalog stores stay decoupled.
"""

from collections.abc import Iterable, Mapping
from typing import Any


def product_name_map(products: Iterable[Mapping[str, Any]]) -> dict[str, str]:
    """Build a jancode -> product name lookup."""
    return {product["jancode"]: product["name"] for product in products}


def attach_product_names(
    details: Iterable[Mapping[str, Any]],
    names: Mapping[str, str],
) -> list[dict[str, Any]]:
    """Return copies of detail rows with a ``name`` resolved from ``names``.

    Codes missing from the catalog get ``None``.
    """
    return [{**detail, "name": names.get(detail["jancode"])} for detail in details]


def compose_checklist(
    checklist: Mapping[str, Any],
    details: Iterable[Mapping[str, Any]],
    names: Mapping[str, str],
) -> dict[str, Any]:
    """Return a checklist record enriched with its named details and their total."""
    joined = attach_product_names(details, names)
    return {**checklist, "total": len(joined), "details": joined}

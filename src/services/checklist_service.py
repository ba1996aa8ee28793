"""Checklist service: identifier assignment, creation, listing and updates."""

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session

from src.errors import NotFoundError, ValidationError
from src.models.checklist import Checklist, ChecklistDetail
from src.models.product import Product
from src.services.aggregation import compose_checklist, product_name_map
from src.services.identifiers import parse_int_id

logger = logging.getLogger(__name__)

CHECKLIST_NAME_PREFIX = "チェックリスト"


def parse_checklist_id(value: int | str) -> int:
    """Parse a checklist identifier sent as a number or numeric text."""
    return parse_int_id(value, "checklistId")


class ChecklistService:
    """Service for checklist-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def next_checklist_id(self) -> int:
        """Return the current maximum checklist_id plus one, or 1 when empty.

        This is a plain read: two creators racing between this call and their
        insert can be handed the same identifier.
        """
        current = self.db.query(func.max(Checklist.checklist_id)).scalar()
        return (current or 0) + 1

    def create_checklist(self, owner: str, jancodes: Sequence[str]) -> dict[str, Any]:
        """Create a checklist with one empty detail row per product code.

        Returns the checklist joined with product names as of creation time.
        """
        if isinstance(jancodes, str) or not isinstance(jancodes, Sequence) or not jancodes:
            raise ValidationError("jancodes must be a non-empty array")

        checklist_id = self.next_checklist_id()
        today = datetime.now(UTC).date()
        checklist = Checklist(
            checklist_id=checklist_id,
            checklist_name=f"{CHECKLIST_NAME_PREFIX} {today.isoformat()}",
            date_create=today,
            status=0,
            user=owner,
        )
        details = [
            ChecklistDetail(checklist_id=checklist_id, jancode=jancode, dateline=None, datetime=None)
            for jancode in jancodes
        ]
        self.db.add(checklist)
        self.db.add_all(details)
        self.db.commit()
        logger.info(
            f"Created checklist {checklist_id} for '{owner}' with {len(details)} product(s)"
        )

        names = self._product_names(jancodes)
        return compose_checklist(
            checklist.to_dict(), [detail.to_dict() for detail in details], names
        )

    def list_checklists(self, owner: str) -> list[dict[str, Any]]:
        """List the owner's checklists, newest first, each with named details."""
        checklists = (
            self.db.query(Checklist)
            .filter(Checklist.user == owner)
            .order_by(Checklist.date_create.desc(), Checklist.id)
            .all()
        )
        if not checklists:
            return []

        checklist_ids = {checklist.checklist_id for checklist in checklists}
        details = (
            self.db.query(ChecklistDetail)
            .filter(ChecklistDetail.checklist_id.in_(checklist_ids))
            .order_by(ChecklistDetail.id)
            .all()
        )
        details_by_checklist: dict[int, list[dict[str, Any]]] = defaultdict(list)
        for detail in details:
            details_by_checklist[detail.checklist_id].append(detail.to_dict())

        names = self._product_names({detail.jancode for detail in details})
        return [
            compose_checklist(
                checklist.to_dict(), details_by_checklist.get(checklist.checklist_id, []), names
            )
            for checklist in checklists
        ]

    def update_detail(self, checklist_id: int | str, jancode: str, dateline: str) -> None:
        """Set the dateline of one checklist detail and stamp the update time.

        Raises:
            ValidationError: checklist_id is not an integer in the Integer range.
            NotFoundError: no detail row matches (checklist_id, jancode).
        """
        parsed_id = parse_checklist_id(checklist_id)
        detail = (
            self.db.query(ChecklistDetail)
            .filter(ChecklistDetail.checklist_id == parsed_id, ChecklistDetail.jancode == jancode)
            .order_by(ChecklistDetail.id)
            .first()
        )
        if not detail:
            raise NotFoundError("Checklist detail not found")

        detail.dateline = dateline
        detail.datetime = datetime.now(UTC)
        self.db.commit()

    def _product_names(self, jancodes: Iterable[str]) -> dict[str, str]:
        codes = set(jancodes)
        if not codes:
            return {}
        rows = (
            self.db.query(Product.jancode, Product.name).filter(Product.jancode.in_(codes)).all()
        )
        return product_name_map(row._mapping for row in rows)

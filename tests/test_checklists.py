"""Checklist API tests."""

import threading
from datetime import UTC, datetime

from src.models.checklist import Checklist, ChecklistDetail
from src.services.checklist_service import ChecklistService


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def test_create_checklist_on_empty_store(client, auth_headers, products):
    """Test the first checklist gets id 1 and empty detail rows."""
    response = client.post(
        "/create-checklist", headers=auth_headers, json={"jancodes": ["4901234567890"]}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["checklist_id"] == 1
    assert data["user"] == "alice"
    assert data["status"] == 0
    assert data["checklist_name"].endswith(data["date_create"])
    assert data["total"] == 1
    assert len(data["details"]) == 1
    detail = data["details"][0]
    assert detail["jancode"] == "4901234567890"
    assert detail["name"] == "Green Tea 500ml"
    assert detail["dateline"] is None
    assert detail["datetime"] is None


def test_create_checklist_detail_count(client, auth_headers, products, db):
    """Test N codes yield N empty detail rows."""
    codes = ["4901234567890", "4909876543210", "4999999999999"]
    response = client.post("/create-checklist", headers=auth_headers, json={"jancodes": codes})
    data = response.json()["data"]
    assert [d["jancode"] for d in data["details"]] == codes
    assert all(d["dateline"] is None and d["datetime"] is None for d in data["details"])
    # Unknown codes resolve to no name
    assert data["details"][2]["name"] is None
    assert db.query(ChecklistDetail).count() == 3


def test_create_checklist_ids_increase(client, auth_headers, other_user_headers):
    """Test sequential creations get increasing ids across owners."""
    first = client.post("/create-checklist", headers=auth_headers, json={"jancodes": ["1"]})
    second = client.post(
        "/create-checklist", headers=other_user_headers, json={"jancodes": ["2"]}
    )
    third = client.post("/create-checklist", headers=auth_headers, json={"jancodes": ["3"]})
    ids = [r.json()["data"]["checklist_id"] for r in (first, second, third)]
    assert ids == [1, 2, 3]


def test_create_checklist_empty_array(client, auth_headers, db):
    """Test an empty code list is rejected without writing."""
    response = client.post("/create-checklist", headers=auth_headers, json={"jancodes": []})
    assert response.status_code == 400
    assert "jancodes" in response.json()["error"]
    assert db.query(Checklist).count() == 0


def test_create_checklist_not_an_array(client, auth_headers):
    """Test a non-array code list is rejected."""
    response = client.post(
        "/create-checklist", headers=auth_headers, json={"jancodes": "4901234567890"}
    )
    assert response.status_code == 400


def test_create_checklist_requires_token(client):
    """Test creating a checklist requires authentication."""
    response = client.post("/create-checklist", json={"jancodes": ["1"]})
    assert response.status_code == 401


def test_list_checklists_owner_only(client, auth_headers, other_user_headers, products):
    """Test listing shows only the caller's checklists with totals and names."""
    client.post(
        "/create-checklist",
        headers=auth_headers,
        json={"jancodes": ["4901234567890", "4909876543210"]},
    )
    client.post(
        "/create-checklist", headers=other_user_headers, json={"jancodes": ["4900000000017"]}
    )

    response = client.get("/checklists", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["user"] == "alice"
    assert data[0]["total"] == 2
    assert [d["name"] for d in data[0]["details"]] == ["Green Tea 500ml", "Rice Crackers"]


def test_list_checklists_newest_first(client, auth_headers, db):
    """Test checklists are ordered by creation date descending."""
    db.add_all(
        [
            Checklist(
                checklist_id=1,
                checklist_name="old",
                date_create=datetime(2026, 1, 1).date(),
                user="alice",
            ),
            Checklist(
                checklist_id=2,
                checklist_name="new",
                date_create=datetime(2026, 3, 1).date(),
                user="alice",
            ),
        ]
    )
    db.commit()

    response = client.get("/checklists", headers=auth_headers)
    data = response.json()
    assert [c["checklist_name"] for c in data] == ["new", "old"]
    assert data[0]["total"] == 0
    assert data[0]["details"] == []


def test_list_checklists_empty(client, auth_headers):
    """Test listing with no checklists."""
    response = client.get("/checklists", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


def test_update_product_sets_dateline(client, auth_headers, products):
    """Test updating a detail is visible when re-listing."""
    created = client.post(
        "/create-checklist", headers=auth_headers, json={"jancodes": ["4901234567890"]}
    )
    checklist_id = created.json()["data"]["checklist_id"]
    before = datetime.now(UTC).replace(microsecond=0)

    response = client.post(
        "/update-product",
        headers=auth_headers,
        json={"checklistId": str(checklist_id), "jancode": "4901234567890", "dateline": "2026-12-01"},
    )
    assert response.status_code == 200
    assert response.json() == {"success": True}

    detail = client.get("/checklists", headers=auth_headers).json()[0]["details"][0]
    assert detail["dateline"] == "2026-12-01"
    assert detail["datetime"] is not None
    assert _parse_timestamp(detail["datetime"]) >= before


def test_update_product_accepts_numeric_id(client, auth_headers):
    """Test checklistId may be sent as a number."""
    client.post("/create-checklist", headers=auth_headers, json={"jancodes": ["1111"]})
    response = client.post(
        "/update-product",
        headers=auth_headers,
        json={"checklistId": 1, "jancode": "1111", "dateline": "2026-12-01"},
    )
    assert response.status_code == 200


def test_update_product_not_found_mutates_nothing(client, auth_headers, db):
    """Test updating a missing (checklist, code) pair."""
    client.post("/create-checklist", headers=auth_headers, json={"jancodes": ["1111"]})

    response = client.post(
        "/update-product",
        headers=auth_headers,
        json={"checklistId": "1", "jancode": "2222", "dateline": "2026-12-01"},
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Checklist detail not found"}

    details = db.query(ChecklistDetail).all()
    assert len(details) == 1
    assert details[0].dateline is None
    assert details[0].datetime is None


def test_update_product_non_numeric_id(client, auth_headers):
    """Test a non-numeric checklistId is a validation error."""
    client.post("/create-checklist", headers=auth_headers, json={"jancodes": ["1111"]})
    response = client.post(
        "/update-product",
        headers=auth_headers,
        json={"checklistId": "abc", "jancode": "1111", "dateline": "2026-12-01"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "checklistId must be an integer"}


def test_update_product_missing_fields(client, auth_headers):
    """Test updating without a dateline."""
    response = client.post(
        "/update-product", headers=auth_headers, json={"checklistId": "1", "jancode": "1111"}
    )
    assert response.status_code == 400
    assert "dateline" in response.json()["error"]


def test_concurrent_creation_can_assign_duplicate_ids(monkeypatch, session_factory):
    """Two creators reading the max before either inserts get the same id.

    checklist_id assignment is a read followed by a separate write, so this
    documents the collision rather than asserting uniqueness.
    """
    barrier = threading.Barrier(2, timeout=10)
    original = ChecklistService.next_checklist_id

    def next_id_then_wait(self):
        checklist_id = original(self)
        barrier.wait()
        return checklist_id

    monkeypatch.setattr(ChecklistService, "next_checklist_id", next_id_then_wait)

    results: dict[str, int] = {}
    errors: list[BaseException] = []

    def create(owner: str) -> None:
        session = session_factory()
        try:
            created = ChecklistService(session).create_checklist(owner, ["4901234567890"])
            results[owner] = created["checklist_id"]
        except BaseException as e:  # surfaced through the assertion below
            errors.append(e)
        finally:
            session.close()

    threads = [threading.Thread(target=create, args=(owner,)) for owner in ("alice", "bob")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert results["alice"] == results["bob"] == 1


def test_create_checklist_rejects_overlong_code(client, auth_headers, db):
    """Test a JAN code longer than the column allows is rejected up front."""
    response = client.post(
        "/create-checklist", headers=auth_headers, json={"jancodes": ["1" * 65]}
    )
    assert response.status_code == 400
    assert "jancodes" in response.json()["error"]
    assert db.query(Checklist).count() == 0


def test_list_checklists_same_day_in_creation_order(client, auth_headers):
    """Test checklists created on the same day come back oldest first."""
    for code in ("1111", "2222", "3333"):
        client.post("/create-checklist", headers=auth_headers, json={"jancodes": [code]})

    data = client.get("/checklists", headers=auth_headers).json()
    assert len({c["date_create"] for c in data}) == 1
    assert [c["checklist_id"] for c in data] == [1, 2, 3]
    assert [c["details"][0]["jancode"] for c in data] == ["1111", "2222", "3333"]

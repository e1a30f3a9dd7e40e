# backend/tests/test_api_bids.py
from __future__ import annotations


def _mk_house(client) -> int:
    r = client.post("/houses", json={"address": "89 Road of Forks, Bern", "country": "Switzerland", "price": 500000})
    assert r.status_code == 201, r.text
    return int(r.json()["id"])


def test_bid_reference_mismatch_is_400(client):
    r = client.post("/house/5/bids", json={"houseId": 7, "amount": 1000})

    assert r.status_code == 400
    detail = r.json()["detail"]
    assert "5" in detail and "7" in detail


def test_mismatch_reported_even_for_an_otherwise_valid_bid(client):
    hid = _mk_house(client)
    r = client.post(f"/house/{hid}/bids", json={"houseId": hid + 1000, "bidder": "Sonia", "amount": 1000})
    assert r.status_code == 400


def test_create_bid(client):
    hid = _mk_house(client)
    r = client.post(f"/house/{hid}/bids", json={"houseId": hid, "bidder": "Sonia Reading", "amount": 200000})

    assert r.status_code == 201
    body = r.json()
    assert body["houseId"] == hid
    assert body["bidder"] == "Sonia Reading"
    assert body["amount"] == 200000
    assert isinstance(body["id"], int)
    assert r.headers["location"] == f"/houses/{hid}/bids"


def test_list_bids_for_house(client):
    hid = _mk_house(client)
    for who, amount in (("Sonia", 100), ("Kim", 150)):
        client.post(f"/house/{hid}/bids", json={"houseId": hid, "bidder": who, "amount": amount})

    r = client.get(f"/house/{hid}/bids")
    assert r.status_code == 200
    assert [(b["bidder"], b["amount"]) for b in r.json()] == [("Sonia", 100), ("Kim", 150)]


def test_list_bids_unknown_house_is_404(client):
    assert client.get("/house/987654/bids").status_code == 404


def test_bid_validation_is_422(client):
    hid = _mk_house(client)
    r = client.post(f"/house/{hid}/bids", json={"houseId": hid, "amount": -5})

    assert r.status_code == 422
    errors = r.json()["errors"]
    assert list(errors) == ["bidder", "amount"]


def test_bid_on_unknown_house_is_404(client):
    r = client.post("/house/987654/bids", json={"houseId": 987654, "bidder": "Sonia", "amount": 10})
    assert r.status_code == 404


def test_bids_disappear_with_their_house(client):
    hid = _mk_house(client)
    client.post(f"/house/{hid}/bids", json={"houseId": hid, "bidder": "Sonia", "amount": 100})

    assert client.delete(f"/houses/{hid}").status_code == 200
    assert client.get(f"/house/{hid}/bids").status_code == 404


def test_mismatch_beats_a_wrongly_typed_field(client):
    r = client.post("/house/5/bids", json={"houseId": 7, "bidder": "Sonia", "amount": "lots"})

    assert r.status_code == 400
    assert r.json()["detail"] == "House id 7 in body does not match house id 5 in URL."


def test_fractional_amount_with_wrong_house_is_400(client):
    r = client.post("/house/5/bids", json={"houseId": 7, "amount": 10.5})
    assert r.status_code == 400


def test_wrong_type_and_rule_errors_are_reported_together(client):
    hid = _mk_house(client)
    r = client.post(f"/house/{hid}/bids", json={"houseId": hid, "bidder": "  ", "amount": "lots"})

    assert r.status_code == 422
    errors = r.json()["errors"]
    assert list(errors) == ["bidder", "amount"]
    assert errors["bidder"] == ["The Bidder field must not be blank."]
    assert "integer" in errors["amount"][0]


def test_bid_for_huge_house_id_is_404(client):
    huge = 2**70
    r = client.post(f"/house/{huge}/bids", json={"houseId": huge, "bidder": "Sonia", "amount": 1000})
    assert r.status_code == 404

    assert client.get(f"/house/{huge}/bids").status_code == 404

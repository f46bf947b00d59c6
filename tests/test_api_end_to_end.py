from fixtures_data import PNG_BYTES, reservation_body


def test_login_rejects_bad_password(client):
    response = client.post("/api/login", json={"email": "admin@example.com", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid credentials"}


def test_login_returns_token_and_user(client):
    response = client.post("/api/login", json={"email": "super@example.com", "password": "secret123"})

    assert response.status_code == 200
    body = response.json()
    assert body["token"]
    assert body["user"]["role"] == "supervisor"
    assert "password" not in body["user"]


def test_unauthenticated_request_is_rejected(client):
    response = client.get("/api/units")

    assert response.status_code == 401
    assert response.json() == {"detail": "Authentication required"}


def test_invalid_token_is_treated_as_anonymous(client):
    response = client.get("/api/units", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


def test_anonymous_upload_is_rejected_before_the_file_is_checked(client, blob_store):
    response = client.post(
        "/api/reservations/payment-proof",
        data={"reservationUuid": "any"},
        files={"paymentProof": ("notes.txt", b"plain text", "text/plain")},
    )

    assert response.status_code == 401
    assert response.json() == {"detail": "Authentication required"}
    assert blob_store.blobs == {}


def test_anonymous_form_post_is_rejected_before_validation(client):
    unit = client.post("/api/units", data={"unitCode": "U-1"})
    floor = client.post("/api/floors", data={"label": "L9"})

    assert unit.status_code == 401
    assert floor.status_code == 401


def test_salesman_cannot_create_facility(client, auth_headers):
    response = client.post("/api/facilities", json={"name": "Sauna"}, headers=auth_headers("sales@example.com"))

    assert response.status_code == 403
    assert response.json() == {"detail": "Insufficient permissions"}


def test_unknown_route(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"error": "Route not found"}


def test_pagination_uses_camel_case_keys(client, auth_headers):
    response = client.get("/api/towers", params={"page": 1, "limit": 1}, headers=auth_headers("sales@example.com"))

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["currentPage"] == 1
    assert body["lastPage"] == 1
    assert body["nextPage"] is None
    assert body["data"][0]["name"] == "Tower A"


def test_build_a_unit_and_find_it_by_code(client, auth_headers, blob_store):
    admin = auth_headers("admin@example.com")

    tower = client.post("/api/towers", json={"name": "T1"}, headers=admin)
    assert tower.status_code == 201
    tower_id = tower.json()["id"]

    floor = client.post(
        "/api/floors",
        data={"towerId": str(tower_id), "label": "L1", "number": "1"},
        files={"floorPlanImage": ("plan.png", PNG_BYTES, "image/png")},
        headers=admin,
    )
    assert floor.status_code == 201, floor.text
    assert floor.json()["towerName"] == "T1"
    assert floor.json()["floorPlanImageUrl"] in blob_store.blobs

    room_type = client.post("/api/room-types", json={"name": "1BR"}, headers=admin).json()
    first = client.post("/api/facilities", json={"name": "F1"}, headers=admin).json()
    second = client.post("/api/facilities", json={"name": "F2"}, headers=admin).json()

    unit = client.post(
        "/api/units",
        data={
            "floorId": str(floor.json()["id"]),
            "roomTypeId": str(room_type["id"]),
            "unitCode": "U-100",
            "priceOffer": "1250000000",
            "semiGrossArea": "48.5",
            "facilities": [str(first["id"]), str(second["id"])],
        },
        files=[
            ("images", ("front.png", PNG_BYTES, "image/png")),
            ("images", ("back.png", PNG_BYTES, "image/png")),
        ],
        headers=admin,
    )
    assert unit.status_code == 201, unit.text
    assert unit.json()["status"] == "available"

    listing = client.get("/api/units", params={"unitCode": "U-100"}, headers=auth_headers("sales@example.com"))

    assert listing.status_code == 200
    units = listing.json()["data"]
    assert len(units) == 1
    assert sorted(units[0]["facilities"]) == ["F1", "F2"]
    assert len(units[0]["images"]) == 2
    assert units[0]["roomTypeName"] == "1BR"


def test_unit_upload_rejects_unsupported_file_type(client, auth_headers, seed, blob_store):
    response = client.post(
        "/api/units",
        data={
            "floorId": str(seed.floor.id),
            "roomTypeId": str(seed.room_type.id),
            "unitCode": "U-101",
            "priceOffer": "1",
            "semiGrossArea": "10",
        },
        files=[("images", ("notes.txt", b"plain text", "text/plain"))],
        headers=auth_headers("admin@example.com"),
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "Unsupported file type. Only JPG, PNG, and WEBP are allowed."}
    assert blob_store.blobs == {}


def test_reservation_lifecycle_over_http(client, auth_headers, unit, blob_store):
    sales = auth_headers("sales@example.com")
    supervisor = auth_headers("super@example.com")

    created = client.post("/api/reservations", json=reservation_body(unit.id), headers=sales)
    assert created.status_code == 201, created.text
    reservation = created.json()
    assert reservation["status"] == "reserved"
    assert reservation["unitCode"] == "A-101"
    assert reservation["salesmanName"] == "Sari Sales"
    assert reservation["customer"]["ktpNumber"] == "3171234567890001"

    proof = client.post(
        "/api/reservations/payment-proof",
        data={"reservationUuid": reservation["uuid"]},
        files={"paymentProof": ("proof.png", PNG_BYTES, "image/png")},
        headers=sales,
    )
    assert proof.status_code == 200, proof.text
    assert proof.json() == {"success": True}
    assert client.get(f"/api/units/{unit.id}", headers=sales).json()["status"] == "reserved"

    forbidden = client.patch(
        "/api/reservations/status",
        json={"reservationUuid": reservation["uuid"], "status": "booked"},
        headers=sales,
    )
    assert forbidden.status_code == 403

    booked = client.patch(
        "/api/reservations/status",
        json={"reservationUuid": reservation["uuid"], "status": "booked"},
        headers=supervisor,
    )
    assert booked.status_code == 200
    assert client.get(f"/api/units/{unit.id}", headers=sales).json()["status"] == "booked"

    fetched = client.get(f"/api/reservations/{reservation['uuid']}", headers=supervisor).json()
    assert fetched["status"] == "booked"
    assert fetched["paymentProofUrl"] in blob_store.blobs


def test_reservation_for_missing_unit_returns_not_found(client, auth_headers, seed):
    response = client.post("/api/reservations", json=reservation_body(9999), headers=auth_headers("sales@example.com"))

    assert response.status_code == 404


def test_health_reports_database_state(client, monkeypatch):
    import main

    monkeypatch.setattr(main, "check_connection", lambda: False)
    response = client.get("/api/health")

    assert response.status_code == 503
    assert response.json() == {"status": "degraded", "database": False}

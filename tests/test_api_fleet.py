# tests/test_api_fleet.py
"""Driver and vehicle management endpoints (admin)."""

NEW_DRIVER = {"name": "Kemi Balogun", "phoneNumber": "+234 810 000 1111", "licenseNumber": "LIC-11112222"}


class TestDrivers:
    def test_list(self, admin_client):
        drivers = admin_client.get("/api/drivers").json()
        assert len(drivers) == 8
        assert drivers[0]["name"] == "Adebayo Johnson"
        assert drivers[0]["licenseNumber"] == "LIC-23456789"

    def test_create_defaults_to_active(self, admin_client):
        resp = admin_client.post("/api/drivers", json=NEW_DRIVER)
        assert resp.status_code == 201
        body = resp.json()
        assert body["id"] == 9
        assert body["status"] == "active"
        assert body["notes"] is None
        assert body["createdAt"]

    def test_duplicate_license_rejected(self, app, admin_client):
        resp = admin_client.post("/api/drivers", json={**NEW_DRIVER, "licenseNumber": "LIC-23456789"})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Driver with this license number already exists"
        assert app.state.storage.count_stats()["drivers_count"] == 8

    def test_invalid_status_rejected(self, admin_client):
        resp = admin_client.post("/api/drivers", json={**NEW_DRIVER, "status": "retired"})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Validation failed"

    def test_partial_update(self, admin_client):
        resp = admin_client.put("/api/drivers/3", json={"status": "suspended"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "suspended"
        assert body["name"] == "Ibrahim Musa"
        assert body["licenseNumber"] == "LIC-54321678"

    def test_update_can_clear_notes(self, admin_client):
        assert admin_client.put("/api/drivers/1", json={"notes": None}).json()["notes"] is None

    def test_update_keeping_own_license(self, admin_client):
        resp = admin_client.put("/api/drivers/1", json={"licenseNumber": "LIC-23456789"})
        assert resp.status_code == 200

    def test_update_license_collision(self, admin_client):
        resp = admin_client.put("/api/drivers/2", json={"licenseNumber": "LIC-23456789"})
        assert resp.status_code == 400

    def test_update_missing(self, admin_client):
        resp = admin_client.put("/api/drivers/999", json={"name": "Nobody"})
        assert resp.status_code == 404
        assert resp.json() == {"detail": "Driver not found"}

    def test_no_delete_route(self, admin_client):
        assert admin_client.delete("/api/drivers/1").status_code == 405


class TestVehicles:
    def test_list(self, admin_client):
        vehicles = admin_client.get("/api/vehicles").json()
        assert [v["plateNumber"] for v in vehicles] == ["LAS-432KJ", "ABJ-223KL", "LAS-876JK"]
        assert vehicles[0]["driverId"] == 1
        assert vehicles[0]["status"] == "active"

    def test_create(self, admin_client):
        resp = admin_client.post("/api/vehicles", json={"plateNumber": "KAN-101AA", "type": "Keke", "driverId": 7})
        assert resp.status_code == 201
        body = resp.json()
        assert body["id"] == 4
        assert body["status"] == "active"
        assert body["registrationDate"]

    def test_duplicate_plate_ignores_case(self, admin_client):
        resp = admin_client.post("/api/vehicles", json={"plateNumber": "las-432kj", "type": "Bus", "driverId": 4})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Vehicle with this plate number already exists"

    def test_unknown_driver(self, admin_client):
        resp = admin_client.post("/api/vehicles", json={"plateNumber": "NEW-1", "type": "Bus", "driverId": 999})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Driver not found"

    def test_creation_logged_after_first_activity(self, admin_client):
        admin_client.post("/api/feedbacks", json={
            "passengerName": "Tolu", "plateNumber": "LAS-432KJ", "rating": 5,
            "feedbackType": "compliment", "message": "Great ride",
        })
        admin_client.post("/api/vehicles", json={"plateNumber": "KAN-101AA", "type": "Keke", "driverId": 7})

        latest = admin_client.get("/api/activities").json()[0]
        assert latest["type"] == "vehicle_created"
        assert latest["description"] == "Keke (KAN-101AA) assigned to Olumide Adeyemi"
        assert latest["entityType"] == "vehicle"
        assert latest["entityId"] == 4

    def test_update(self, admin_client):
        resp = admin_client.put("/api/vehicles/2", json={"status": "maintenance", "driverId": 4})
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "maintenance"
        assert body["driverId"] == 4
        assert body["plateNumber"] == "ABJ-223KL"

    def test_update_plate_collision(self, admin_client):
        resp = admin_client.put("/api/vehicles/2", json={"plateNumber": "LAS-432KJ"})
        assert resp.status_code == 400

    def test_update_own_plate_case_change(self, admin_client):
        resp = admin_client.put("/api/vehicles/2", json={"plateNumber": "abj-223kl"})
        assert resp.status_code == 200
        assert resp.json()["plateNumber"] == "abj-223kl"

    def test_update_unknown_driver(self, admin_client):
        resp = admin_client.put("/api/vehicles/2", json={"driverId": 999})
        assert resp.status_code == 400

    def test_update_missing(self, admin_client):
        assert admin_client.put("/api/vehicles/999", json={"type": "Bus"}).status_code == 404

    def test_delete(self, admin_client):
        resp = admin_client.delete("/api/vehicles/3")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Vehicle deleted successfully"}
        assert len(admin_client.get("/api/vehicles").json()) == 2
        assert admin_client.delete("/api/vehicles/3").status_code == 404

    def test_non_numeric_id(self, admin_client):
        assert admin_client.delete("/api/vehicles/abc").status_code == 400

"""
Tests for staff endpoints: CRUD, filters, validation and email uniqueness.
"""

from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from tiechef_api.repositories import StaffRepository


class TestStaffCrud:
    """Create, read, update and delete through the API."""

    def test_list_empty(self, client):
        response = client.get("/api/staff")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_returns_201_with_location(self, client, staff_payload):
        response = client.post("/api/staff", json=staff_payload())
        assert response.status_code == 201

        data = response.json()
        assert data["staffId"] > 0
        assert data["fullName"] == "Alexey Kozlov"
        assert data["type"] == "Chef"
        assert response.headers["Location"].endswith(f"/api/staff/{data['staffId']}")

    def test_created_staff_round_trips(self, client, staff_payload):
        """get-by-id returns what was submitted plus the assigned id."""
        created = client.post("/api/staff", json=staff_payload()).json()

        fetched = client.get(f"/api/staff/{created['staffId']}").json()
        assert fetched == created
        assert fetched["email"] == "alexey.kozlov@tiechef.com"
        assert fetched["salary"] == 40000
        assert fetched["kpi"] == "92%"

    def test_get_missing_returns_404(self, client):
        response = client.get("/api/staff/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Staff with ID 999 not found"

    def test_update_replaces_fields(self, client, seed_staff, staff_payload):
        body = staff_payload(
            staffId=seed_staff.staff_id,
            fullName="Maria Ivanova",
            email=seed_staff.email,
            salary=36000.5,
        )
        response = client.put(f"/api/staff/{seed_staff.staff_id}", json=body)
        assert response.status_code == 200

        data = response.json()
        assert data["fullName"] == "Maria Ivanova"
        assert data["salary"] == 36000.5
        assert data["type"] == "Chef"

    def test_update_id_mismatch_returns_400(self, client, seed_staff, staff_payload):
        response = client.put(
            f"/api/staff/{seed_staff.staff_id}",
            json=staff_payload(staffId=seed_staff.staff_id + 1),
        )
        assert response.status_code == 400
        assert "does not match" in response.json()["detail"]

    def test_update_missing_returns_404(self, client, staff_payload):
        response = client.put("/api/staff/42", json=staff_payload(staffId=42))
        assert response.status_code == 404

    def test_delete_returns_message(self, client, seed_staff):
        staff_id = seed_staff.staff_id
        response = client.delete(f"/api/staff/{staff_id}")
        assert response.status_code == 200
        assert response.json() == {"message": "Staff Maria Sidorova deleted successfully"}

        assert client.get(f"/api/staff/{staff_id}").status_code == 404

    def test_delete_missing_returns_404(self, client):
        assert client.delete("/api/staff/5").status_code == 404


class TestStaffFilters:
    """by-type and by-role listings."""

    def test_by_type(self, client, seed_staff, staff_payload):
        client.post("/api/staff", json=staff_payload())

        waiters = client.get("/api/staff/by-type/Waiter").json()
        assert [s["fullName"] for s in waiters] == ["Maria Sidorova"]

        chefs = client.get("/api/staff/by-type/Chef").json()
        assert [s["fullName"] for s in chefs] == ["Alexey Kozlov"]

    def test_by_role(self, client, seed_staff):
        assert len(client.get("/api/staff/by-role/Waiter").json()) == 1
        assert client.get("/api/staff/by-role/Administrator").json() == []

    def test_unknown_type_is_rejected(self, client):
        response = client.get("/api/staff/by-type/Astronaut")
        assert response.status_code == 400
        assert response.json()["detail"]["message"] == "Validation failed"


class TestStaffValidation:
    """Rule messages surface in the 400 body."""

    def test_empty_full_name(self, client, staff_payload):
        response = client.post("/api/staff", json=staff_payload(fullName=""))
        assert response.status_code == 400

        errors = response.json()["detail"]["errors"]
        assert "Full Name is required" in errors["fullName"]

    def test_zero_salary(self, client, staff_payload):
        response = client.post("/api/staff", json=staff_payload(salary=0))
        assert response.status_code == 400
        assert response.json()["detail"]["errors"]["salary"] == ["Salary must be greater than 0"]

    def test_reports_every_violation(self, client, staff_payload):
        body = staff_payload(fullName="J", email="not-an-email", phoneNumber=12, salary=10.555)
        errors = client.post("/api/staff", json=body).json()["detail"]["errors"]

        assert errors["fullName"] == ["Full Name must be between 2 and 100 characters"]
        assert errors["email"] == ["Invalid Email format"]
        assert errors["phoneNumber"] == ["Phone Number must be valid"]
        assert errors["salary"] == ["Salary cannot have more than 2 decimal places"]

    def test_name_with_digits(self, client, staff_payload):
        errors = client.post("/api/staff", json=staff_payload(fullName="R2 D2")).json()["detail"]["errors"]
        assert errors["fullName"] == ["Full Name must contain only letters and spaces"]

    def test_missing_type_is_rejected(self, client, staff_payload):
        body = staff_payload()
        del body["type"]
        response = client.post("/api/staff", json=body)
        assert response.status_code == 400
        assert "type" in response.json()["detail"]["errors"]

    def test_rejected_create_stores_nothing(self, client, staff_payload):
        client.post("/api/staff", json=staff_payload(salary=0))
        assert client.get("/api/staff").json() == []

    def test_phone_number_past_integer_range(self, client, staff_payload):
        response = client.post("/api/staff", json=staff_payload(phoneNumber=10**20))

        assert response.status_code == 400
        assert response.json()["detail"]["errors"] == {"phoneNumber": ["Phone Number must be valid"]}
        assert client.get("/api/staff").json() == []


class TestStaffEmailUniqueness:
    """Email is unique across staff."""

    def test_duplicate_email_on_create(self, client, seed_staff, staff_payload):
        response = client.post("/api/staff", json=staff_payload(email=seed_staff.email))
        assert response.status_code == 400
        assert response.json()["detail"] == "Staff with this email already exists"

    def test_update_keeping_own_email(self, client, seed_staff, staff_payload):
        body = staff_payload(staffId=seed_staff.staff_id, email=seed_staff.email)
        response = client.put(f"/api/staff/{seed_staff.staff_id}", json=body)
        assert response.status_code == 200

    def test_update_to_other_members_email(self, client, seed_staff, staff_payload):
        other = client.post("/api/staff", json=staff_payload()).json()

        body = staff_payload(staffId=other["staffId"], email=seed_staff.email)
        response = client.put(f"/api/staff/{other['staffId']}", json=body)
        assert response.status_code == 400
        assert response.json()["detail"] == "Staff with this email already exists"

    def test_field_rules_run_before_uniqueness(self, client, seed_staff, staff_payload):
        response = client.post(
            "/api/staff",
            json=staff_payload(email=seed_staff.email, salary=0),
        )
        assert response.status_code == 400
        assert response.json()["detail"]["message"] == "Validation failed"


class TestStaffSeed:
    """init-test-data."""

    def test_seeds_three_staff(self, client):
        response = client.post("/api/staff/init-test-data")
        assert response.status_code == 200
        assert response.json() == {"message": "Created 3 test staff records", "created": 3}

        names = [s["fullName"] for s in client.get("/api/staff").json()]
        assert names == ["Ivan Petrov", "Maria Sidorova", "Alexey Kozlov"]

    def test_seed_is_idempotent(self, client):
        client.post("/api/staff/init-test-data")
        response = client.post("/api/staff/init-test-data")

        assert response.json() == {"message": "Test data already exists", "created": 0}
        assert len(client.get("/api/staff").json()) == 3


class TestStaffDatabaseFailure:
    """A failing commit surfaces as 500."""

    def test_commit_failure_returns_500(self, client, staff_payload):
        error = OperationalError("INSERT", {}, Exception("disk I/O error"))
        with patch.object(StaffRepository, "commit", side_effect=error):
            response = client.post("/api/staff", json=staff_payload())

        assert response.status_code == 500
        assert response.json()["detail"] == "Database error during create staff. Please try again."

"""Tests for the admin, head admin, department and court admin panels."""

from uuid import uuid4

import pytest


@pytest.fixture
def department(client, admin_headers) -> dict:
    """A department created through the head admin panel."""
    response = client.post(
        "/api/head-admin/departments",
        json={"name": "Computer Science", "head_name": "Dr. Verma"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def department_headers(client, department) -> dict[str, str]:
    credentials = department["credentials"]
    response = client.post(
        "/api/department/login",
        json={"department_id": credentials["department_id"], "password": credentials["password"]},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


class TestAdminLogin:
    def test_valid_password(self, client):
        response = client.post("/api/admin/login", json={"password": "admin123"})

        assert response.status_code == 200
        assert response.json()["token"] == "admin123"

    def test_invalid_password(self, client):
        response = client.post("/api/admin/login", json={"password": "nope"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid admin password"

    def test_protected_routes(self, client):
        assert client.get("/api/admin/courses").status_code == 401
        assert client.get("/api/admin/courses", headers={"Authorization": "Bearer x"}).status_code == 403


class TestCourses:
    def test_crud(self, client, admin_headers):
        created = client.post(
            "/api/admin/courses",
            json={"course_name": "BCA", "course_type": "UG", "fees_per_year": 25000},
            headers=admin_headers,
        )
        assert created.status_code == 200
        course = created.json()["course"]
        assert course["is_active"] is True

        courses = client.get("/api/admin/courses", headers=admin_headers).json()["courses"]
        assert [c["course_name"] for c in courses] == ["BCA"]

        updated = client.put(
            f"/api/admin/courses/{course['id']}",
            json={"duration": "3 years"},
            headers=admin_headers,
        ).json()["course"]
        assert updated["duration"] == "3 years"
        assert updated["course_name"] == "BCA"

        deleted = client.delete(f"/api/admin/courses/{course['id']}", headers=admin_headers)
        assert deleted.json() == {"message": "Course deleted successfully"}
        assert client.delete(f"/api/admin/courses/{course['id']}", headers=admin_headers).status_code == 404

    def test_update_missing(self, client, admin_headers):
        response = client.put(f"/api/admin/courses/{uuid4()}", json={}, headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Course not found"

    def test_validation(self, client, admin_headers):
        response = client.post(
            "/api/admin/courses", json={"course_name": "BCA", "total_seats": -1}, headers=admin_headers
        )
        assert response.status_code == 422

    def test_null_for_required_field(self, client, admin_headers):
        course = client.post(
            "/api/admin/courses", json={"course_name": "BCA"}, headers=admin_headers
        ).json()["course"]
        url = f"/api/admin/courses/{course['id']}"

        assert client.put(url, json={"course_name": None}, headers=admin_headers).status_code == 422
        assert client.put(url, json={"is_active": None}, headers=admin_headers).status_code == 422

        unchanged = client.get("/api/admin/courses", headers=admin_headers).json()["courses"][0]
        assert unchanged["course_name"] == "BCA"
        assert unchanged["is_active"] is True

    def test_null_for_optional_field(self, client, admin_headers):
        course = client.post(
            "/api/admin/courses",
            json={"course_name": "BCA", "duration": "3 years"},
            headers=admin_headers,
        ).json()["course"]

        response = client.put(
            f"/api/admin/courses/{course['id']}", json={"duration": None}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["course"]["duration"] is None


class TestStaff:
    def test_duplicate_employee_id_is_replaced(self, client, admin_headers):
        body = {"full_name": "A. Kumar", "employee_id": "EMP-001"}
        first = client.post("/api/admin/staff", json=body, headers=admin_headers).json()["staff"]
        second = client.post("/api/admin/staff", json=body, headers=admin_headers).json()["staff"]

        assert first["employee_id"] == "EMP-001"
        assert second["employee_id"] == "EMP-002"

    def test_update_to_taken_employee_id(self, client, admin_headers):
        client.post(
            "/api/admin/staff", json={"full_name": "A. Kumar", "employee_id": "EMP-001"}, headers=admin_headers
        )
        other = client.post(
            "/api/admin/staff", json={"full_name": "B. Singh", "employee_id": "EMP-005"}, headers=admin_headers
        ).json()["staff"]
        url = f"/api/admin/staff/{other['id']}"

        response = client.put(url, json={"employee_id": "EMP-001"}, headers=admin_headers)
        assert response.status_code == 409
        assert response.json()["detail"] == "Employee ID already in use"

        same = client.put(url, json={"employee_id": "EMP-005", "role": "Lab"}, headers=admin_headers)
        assert same.status_code == 200
        assert same.json()["staff"]["role"] == "Lab"

    def test_update_rejects_null_name(self, client, admin_headers):
        staff = client.post(
            "/api/admin/staff", json={"full_name": "A. Kumar", "employee_id": "T-9"}, headers=admin_headers
        ).json()["staff"]

        response = client.put(
            f"/api/admin/staff/{staff['id']}", json={"full_name": None}, headers=admin_headers
        )
        assert response.status_code == 422

    def test_delete(self, client, admin_headers):
        staff = client.post(
            "/api/admin/staff",
            json={"full_name": "B. Singh", "employee_id": "T-1"},
            headers=admin_headers,
        ).json()["staff"]

        response = client.delete(f"/api/admin/staff/{staff['id']}", headers=admin_headers)
        assert response.json() == {"message": "Staff member deleted successfully"}

    def test_stats(self, client, admin_headers):
        client.post(
            "/api/admin/staff",
            json={"full_name": "B. Singh", "employee_id": "T-1"},
            headers=admin_headers,
        )

        stats = client.get("/api/admin/stats", headers=admin_headers).json()
        assert stats == {"students": 5200, "courses": 0, "staff": 1, "departments": 0}


class TestCollegeSettings:
    def test_upsert_and_delete(self, client, admin_headers):
        url = "/api/admin/college-settings/principal"
        client.put(url, json={"value": {"title": "Principal", "content": "Dr. Sharma"}}, headers=admin_headers)
        setting = client.put(url, json={"value": "Dr. Gupta"}, headers=admin_headers).json()["setting"]
        assert setting["value"] == "Dr. Gupta"

        settings = client.get("/api/admin/college-settings", headers=admin_headers).json()["settings"]
        assert len(settings) == 1

        assert client.delete(url, headers=admin_headers).json() == {"success": True}
        response = client.delete(url, headers=admin_headers)
        assert response.status_code == 404
        assert response.json()["detail"] == "Setting not found"


class TestHeadAdminDepartments:
    def test_create_returns_credentials(self, department):
        assert department["department"]["slug"] == "computer-science"
        assert department["department"]["panel_link"] == "/department/computer-science"
        assert "password" not in department["department"]

        credentials = department["credentials"]
        assert credentials["department_id"].startswith("DEPT-")
        assert len(credentials["password"]) == 12

    def test_duplicate_name(self, client, admin_headers, department):
        response = client.post(
            "/api/head-admin/departments", json={"name": "Computer  Science!"}, headers=admin_headers
        )
        assert response.status_code == 409

    def test_name_without_letters(self, client, admin_headers):
        response = client.post("/api/head-admin/departments", json={"name": "!!!"}, headers=admin_headers)
        assert response.status_code == 422

    def test_invalid_email(self, client, admin_headers):
        response = client.post(
            "/api/head-admin/departments",
            json={"name": "Physics", "contact_email": "not-an-email"},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_update_and_delete(self, client, admin_headers, department):
        id = department["department"]["id"]

        updated = client.put(
            f"/api/head-admin/departments/{id}", json={"head_name": "Dr. Rao"}, headers=admin_headers
        ).json()["department"]
        assert updated["head_name"] == "Dr. Rao"

        assert client.delete(f"/api/head-admin/departments/{id}", headers=admin_headers).json() == {
            "success": True
        }
        assert client.get("/api/department/computer-science").status_code == 404

    def test_stats(self, client, admin_headers, department):
        stats = client.get("/api/head-admin/stats", headers=admin_headers).json()
        assert stats["total_departments"] == 1


class TestNoticesAndEvents:
    def test_notice_listing(self, client, admin_headers):
        for title, priority in (("Holiday", "low"), ("Exam form", "urgent")):
            client.post(
                "/api/head-admin/notices",
                json={"title": title, "content": "Details", "notice_type": "general", "priority": priority},
                headers=admin_headers,
            )

        notices = client.get("/api/public/notices").json()["notices"]
        assert [n["title"] for n in notices] == ["Exam form", "Holiday"]
        assert all(n["is_active"] for n in notices)

    def test_invalid_notice_type(self, client, admin_headers):
        response = client.post(
            "/api/head-admin/notices",
            json={"title": "T", "content": "C", "notice_type": "party"},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_event_defaults_to_now(self, client, admin_headers):
        event = client.post(
            "/api/head-admin/events",
            json={"title": "Annual Fest", "event_type": "cultural"},
            headers=admin_headers,
        ).json()["event"]
        assert event["event_date"]

        events = client.get("/api/public/events").json()["events"]
        assert [e["title"] for e in events] == ["Annual Fest"]

    def test_deactivated_notice_hidden(self, client, admin_headers):
        notice = client.post(
            "/api/head-admin/notices",
            json={"title": "Old", "content": "C", "notice_type": "general"},
            headers=admin_headers,
        ).json()["notice"]
        client.put(
            f"/api/head-admin/notices/{notice['id']}", json={"is_active": False}, headers=admin_headers
        )

        assert client.get("/api/public/notices").json()["notices"] == []

    def test_notice_update_rejects_null_priority(self, client, admin_headers):
        notice = client.post(
            "/api/head-admin/notices",
            json={"title": "Fees", "content": "C", "notice_type": "general"},
            headers=admin_headers,
        ).json()["notice"]

        response = client.put(
            f"/api/head-admin/notices/{notice['id']}", json={"priority": None}, headers=admin_headers
        )
        assert response.status_code == 422


class TestDepartmentPanel:
    def test_login_rejects_wrong_password(self, client, department):
        response = client.post(
            "/api/department/login",
            json={"department_id": department["credentials"]["department_id"], "password": "wrong"},
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    def test_public_department_page(self, client, department):
        response = client.get("/api/department/computer-science")

        assert response.status_code == 200
        assert response.json()["department"]["name"] == "Computer Science"

    def test_data_lifecycle(self, client, admin_headers, department, department_headers):
        id = department["department"]["id"]
        created = client.post(
            f"/api/department/{id}/data",
            json={"data_type": "timetable", "title": "BCA I", "content": "Mon 9 AM", "metadata": {"semester": 1}},
            headers=department_headers,
        )
        assert created.status_code == 200
        data = created.json()["data"]
        assert data["metadata"] == {"semester": 1}

        listed = client.get(f"/api/department/{id}/data", headers=department_headers).json()["data"]
        assert [d["title"] for d in listed] == ["BCA I"]

        updated = client.put(
            f"/api/department/data/{data['id']}", json={"title": "BCA Sem I"}, headers=department_headers
        ).json()["data"]
        assert updated["title"] == "BCA Sem I"

        overview = client.get("/api/head-admin/department-data", headers=admin_headers).json()["data"]
        assert len(overview) == 1

        deleted = client.delete(f"/api/department/data/{data['id']}", headers=department_headers)
        assert deleted.json() == {"success": True}

    def test_cannot_reach_other_department(self, client, department_headers):
        response = client.get(f"/api/department/{uuid4()}/data", headers=department_headers)
        assert response.status_code == 403

    def test_missing_data(self, client, department_headers):
        response = client.delete(f"/api/department/data/{uuid4()}", headers=department_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Data not found or access denied"

    def test_requires_token(self, client, department):
        response = client.get(f"/api/department/{department['department']['id']}/data")
        assert response.status_code == 401


class TestCourtAdmin:
    def test_building_crud(self, client, admin_headers):
        created = client.post(
            "/api/court-admin/buildings",
            json={"building_name": "Civil Block", "total_floors": 2},
            headers=admin_headers,
        ).json()
        assert created["success"] is True
        building = created["building"]

        updated = client.put(
            f"/api/court-admin/buildings/{building['id']}",
            json={"building_code": "CB"},
            headers=admin_headers,
        ).json()["building"]
        assert updated["building_code"] == "CB"

        client.delete(f"/api/court-admin/buildings/{building['id']}", headers=admin_headers)
        assert client.get("/api/court-admin/buildings", headers=admin_headers).json() == {"buildings": []}

    def test_building_update_rejects_null_name(self, client, admin_headers):
        building = client.post(
            "/api/court-admin/buildings", json={"building_name": "Civil Block"}, headers=admin_headers
        ).json()["building"]

        response = client.put(
            f"/api/court-admin/buildings/{building['id']}",
            json={"building_name": None},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_rooms_and_staff(self, client, admin_headers):
        client.post("/api/court-admin/rooms", json={"room_number": "21"}, headers=admin_headers)
        client.post(
            "/api/court-admin/staff",
            json={"staff_name": "R. Mehta", "designation": "Clerk"},
            headers=admin_headers,
        )

        stats = client.get("/api/court-admin/stats", headers=admin_headers).json()
        assert stats == {"buildings": 0, "rooms": 1, "staff": 1}

    def test_missing_room(self, client, admin_headers):
        response = client.delete(f"/api/court-admin/rooms/{uuid4()}", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Room not found"

    def test_requires_admin(self, client):
        assert client.get("/api/court-admin/buildings").status_code == 401

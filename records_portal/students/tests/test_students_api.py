"""
Tests for the students API.
"""

import pytest

from records_portal.core.spreadsheets import BOM
from records_portal.gateway.tests.factories import StudentFactory


@pytest.fixture
def student_rows(backend):
    """Three students, two in the teacher's department."""
    rows = [
        StudentFactory(id=1, student_id="66100001", first_name="สมชาย", year=1),
        StudentFactory(id=2, student_id="66100002", first_name="สมหญิง", year=2, status="Suspended"),
        StudentFactory(
            id=3,
            student_id="65200003",
            first_name="มานะ",
            faculty="คณะวิทยาศาสตร์",
            department="เคมี",
            year=4,
        ),
    ]
    backend.add("students", *rows)
    return rows


@pytest.fixture
def form_data():
    return {
        "student_id": "66100009",
        "first_name": "วิชัย",
        "last_name": "เก่งมาก",
        "faculty": "คณะเทคโนโลยีสารสนเทศ",
        "department": "วิศวกรรมซอฟต์แวร์",
        "year": 1,
        "email": "wichai@university.ac.th",
        "phone": "0811111111",
        "status": "Active",
    }


def send(client, method, path, data=None):
    return getattr(client, method)(
        path,
        data=data,
        content_type="application/json",
        HTTP_X_CSRFTOKEN=client.csrf_token,
    )


class TestListStudents:
    def test_admin_sees_all(self, student_rows, admin_client):
        response = admin_client.get("/api/students")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert data["filtered"] is False
        assert data["faculties"] == ["คณะเทคโนโลยีสารสนเทศ", "คณะวิทยาศาสตร์"]
        assert data["years"] == [1, 2, 4]

    def test_teacher_sees_own_department(self, student_rows, teacher_client):
        data = teacher_client.get("/api/students").json()

        assert data["total"] == 2
        assert {item["department"] for item in data["items"]} == {"วิทยาการคอมพิวเตอร์"}

    def test_filters(self, student_rows, admin_client):
        data = admin_client.get("/api/students", {"q": "6610", "status": "Suspended"}).json()

        assert data["filtered"] is True
        assert [item["id"] for item in data["items"]] == ["2"]

    def test_year_filter(self, student_rows, admin_client):
        data = admin_client.get("/api/students", {"year": 4}).json()
        assert [item["student_id"] for item in data["items"]] == ["65200003"]

    def test_collection_is_cached(self, backend, student_rows, admin_client):
        admin_client.get("/api/students")
        admin_client.get("/api/students", {"q": "สม"})

        assert len(backend.requests_to("GET", "/students")) == 1

    @pytest.mark.parametrize("client_fixture", ["student_client", "alumni_client"])
    def test_forbidden_roles(self, request, client_fixture):
        client = request.getfixturevalue(client_fixture)

        response = client.get("/api/students")

        assert response.status_code == 403
        assert response.json()["code"] == "PERMISSION_DENIED"

    def test_anonymous(self, unauthenticated_client):
        response = unauthenticated_client.get("/api/students")

        assert response.status_code == 401
        assert response.json()["code"] == "NOT_AUTHENTICATED"


class TestStudentDetail:
    def test_detail(self, student_rows, admin_client):
        response = admin_client.get("/api/students/2")

        assert response.status_code == 200
        assert response.json()["status_label"] == "พักการศึกษา"

    def test_other_department_is_hidden_from_teacher(self, student_rows, teacher_client):
        response = teacher_client.get("/api/students/3")

        assert response.status_code == 404
        assert response.json()["message"] == "ไม่พบข้อมูลนักศึกษา"


class TestCreateUpdateDelete:
    def test_create(self, backend, admin_client, form_data):
        response = send(admin_client, "post", "/api/students", form_data)

        assert response.status_code == 201
        assert response.json()["message"] == "เพิ่มนักศึกษาสำเร็จ"
        assert backend.last_json("POST", "/students")["student_id"] == "66100009"
        assert admin_client.get("/api/students").json()["total"] == 1

    def test_create_invalid(self, backend, admin_client, form_data):
        form_data["email"] = "wichai@gmail.com"
        form_data["year"] = 9

        response = send(admin_client, "post", "/api/students", form_data)

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert data["details"]["fields"]["email"] == "อีเมลต้องเป็นของมหาวิทยาลัย (@university.ac.th)"
        assert data["details"]["fields"]["year"] == "ชั้นปีต้องอยู่ระหว่าง 1-5"
        assert backend.requests_to("POST", "/students") == []

    def test_duplicate_relays_backend_message(self, backend, admin_client, form_data):
        backend.fail("POST", "/students", 400, {"success": False, "message": "Student ID already exists"})

        response = send(admin_client, "post", "/api/students", form_data)

        assert response.status_code == 400
        assert response.json()["message"] == "Student ID already exists"

    def test_teacher_cannot_create(self, teacher_client, form_data):
        response = send(teacher_client, "post", "/api/students", form_data)
        assert response.status_code == 403

    def test_update(self, backend, student_rows, admin_client, form_data):
        response = send(admin_client, "put", "/api/students/1", form_data)

        assert response.status_code == 200
        assert response.json()["message"] == "แก้ไขข้อมูลนักศึกษาสำเร็จ"
        assert backend.collections["students"][0]["first_name"] == "วิชัย"

    def test_delete(self, backend, student_rows, admin_client):
        response = send(admin_client, "delete", "/api/students/1")

        assert response.status_code == 200
        assert response.json()["message"] == "ลบนักศึกษาสำเร็จ"
        assert admin_client.get("/api/students").json()["total"] == 2

    def test_delete_failure(self, backend, student_rows, admin_client):
        backend.fail("DELETE", "/students/1", 500)

        response = send(admin_client, "delete", "/api/students/1")

        assert response.status_code == 502
        assert response.json()["message"] == "ไม่สามารถลบนักศึกษาได้"

    @pytest.mark.parametrize("method", ["put", "delete"])
    def test_missing_student_is_not_forwarded(self, backend, student_rows, admin_client, form_data, method):
        response = send(admin_client, method, "/api/students/99", form_data if method == "put" else None)

        assert response.status_code == 404
        assert response.json()["message"] == "ไม่พบข้อมูลนักศึกษา"
        assert backend.requests_to(method.upper(), "/students/99") == []


class TestStatusChange:
    def test_suspend(self, backend, student_rows, admin_client):
        response = send(admin_client, "post", "/api/students/status", {"student_ids": ["1", "3"], "status": "Suspended"})

        assert response.status_code == 200
        assert response.json()["message"] == 'เปลี่ยนสถานะเป็น "พักการศึกษา" สำเร็จ 2 คน'
        assert backend.last_json("PUT", "/students/status/batch") == {"studentIds": [1, 3], "status": "Suspended"}

    def test_graduating_moves_to_alumni(self, backend, student_rows, admin_client):
        """Test that graduated students leave the list and appear as alumni."""
        response = send(admin_client, "post", "/api/students/status", {"student_ids": ["1"], "status": "Graduated"})

        assert response.status_code == 200
        assert response.json()["message"] == "นักศึกษาจบการศึกษาสำเร็จ 1 คน และย้ายไปยังระบบศิษย์เก่าแล้ว"
        assert backend.requests_to("PUT", "/students/status/batch") == []
        students = admin_client.get("/api/students").json()
        assert "1" not in [item["id"] for item in students["items"]]
        alumni = admin_client.get("/api/alumni").json()
        assert [item["alumni_id"] for item in alumni["items"]] == ["66100001"]

    def test_graduate_endpoint(self, backend, student_rows, admin_client):
        response = send(admin_client, "post", "/api/students/graduate", {"student_ids": ["2"]})

        assert response.status_code == 200
        assert response.json()["message"] == "สำเร็จการศึกษาเรียบร้อย"
        assert backend.last_json("POST", "/students/graduate") == {"studentIds": [2]}

    def test_empty_selection(self, student_rows, admin_client):
        response = send(admin_client, "post", "/api/students/status", {"student_ids": [], "status": "Active"})

        assert response.status_code == 400
        assert "student_ids" in response.json()["details"]["fields"]

    def test_teacher_cannot_change_status(self, student_rows, teacher_client):
        response = send(teacher_client, "post", "/api/students/status", {"student_ids": ["1"], "status": "Active"})
        assert response.status_code == 403


class TestExport:
    def test_export_filtered(self, student_rows, admin_client):
        response = admin_client.get("/api/students/export", {"faculty": "คณะวิทยาศาสตร์"})

        assert response.status_code == 200
        assert response["Content-Type"] == "text/csv; charset=utf-8"
        assert response["Content-Disposition"].startswith('attachment; filename="students_')
        lines = response.content.decode("utf-8").splitlines()
        assert lines[0] == BOM + "รหัสนักศึกษา,ชื่อ,นามสกุล,คณะ,สาขา,ชั้นปี,อีเมล,เบอร์โทร,ที่อยู่,สถานะ"
        assert len(lines) == 2
        assert lines[1].startswith("65200003,มานะ,")

    def test_teacher_cannot_export(self, student_rows, teacher_client):
        assert teacher_client.get("/api/students/export").status_code == 403

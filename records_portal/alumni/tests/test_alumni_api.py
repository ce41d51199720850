"""
Tests for the alumni API.
"""

from datetime import date

import pytest

from records_portal.conftest import make_client
from records_portal.core.spreadsheets import BOM
from records_portal.gateway.tests.backend import USERS
from records_portal.gateway.tests.factories import AlumniFactory


@pytest.fixture
def alumni_rows(backend):
    """Alumni of two departments; ALU000 belongs to the alumni test user."""
    rows = [
        AlumniFactory(id=1, alumni_id="ALU000", first_name="สมหญิง", graduation_year=2020),
        AlumniFactory(id=2, alumni_id="ALU001", first_name="Anan", workplace="Bangkok Bank", graduation_year=2022),
        AlumniFactory(
            id=3,
            alumni_id="ALU002",
            first_name="มานี",
            faculty="คณะวิทยาศาสตร์",
            department="เคมี",
            graduation_year=2018,
        ),
    ]
    backend.add("alumni", *rows)
    return rows


@pytest.fixture
def form_data():
    return {
        "alumni_id": "ALU010",
        "first_name": "ปิติ",
        "last_name": "มีสุข",
        "faculty": "คณะเทคโนโลยีสารสนเทศ",
        "department": "วิทยาการคอมพิวเตอร์",
        "graduation_year": 2021,
        "employment_status": "employed",
        "workplace": "Siam Software",
        "position": "Developer",
        "skills": ["Python", " ", "Django "],
    }


def send(client, method, path, data=None):
    return getattr(client, method)(
        path,
        data=data,
        content_type="application/json",
        HTTP_X_CSRFTOKEN=client.csrf_token,
    )


class TestListAlumni:
    @pytest.mark.parametrize("client_fixture", ["admin_client", "teacher_client", "student_client"])
    def test_staff_and_students_see_all(self, request, alumni_rows, client_fixture):
        client = request.getfixturevalue(client_fixture)

        data = client.get("/api/alumni").json()

        assert data["total"] == 3
        assert data["years"] == [2022, 2020, 2018]

    def test_alumni_see_own_department(self, alumni_rows, alumni_client):
        data = alumni_client.get("/api/alumni").json()

        assert [item["alumni_id"] for item in data["items"]] == ["ALU000", "ALU001"]

    def test_search_workplace(self, alumni_rows, admin_client):
        data = admin_client.get("/api/alumni", {"q": "bangkok"}).json()

        assert data["filtered"] is True
        assert [item["id"] for item in data["items"]] == ["2"]

    def test_year_filter(self, alumni_rows, admin_client):
        data = admin_client.get("/api/alumni", {"year": 2018}).json()
        assert [item["alumni_id"] for item in data["items"]] == ["ALU002"]

    def test_anonymous(self, unauthenticated_client):
        assert unauthenticated_client.get("/api/alumni").status_code == 401


class TestMyRecord:
    def test_own_record(self, alumni_rows, alumni_client):
        response = alumni_client.get("/api/alumni/me")

        assert response.status_code == 200
        assert response.json()["id"] == "1"

    def test_missing_record(self, backend, alumni_client):
        response = alumni_client.get("/api/alumni/me")

        assert response.status_code == 404
        assert response.json()["message"] == "ไม่พบข้อมูลศิษย์เก่าของคุณ"

    def test_not_alumni(self, alumni_rows, student_client):
        assert student_client.get("/api/alumni/me").status_code == 403


class TestAlumniDetail:
    def test_detail(self, alumni_rows, student_client):
        response = student_client.get("/api/alumni/3")

        assert response.status_code == 200
        assert response.json()["skills"] == ["Python", "SQL"]

    def test_other_department_hidden_from_alumni(self, alumni_rows, alumni_client):
        assert alumni_client.get("/api/alumni/3").status_code == 404


class TestCreateAlumni:
    def test_create_generates_avatar(self, backend, admin_client, form_data):
        response = send(admin_client, "post", "/api/alumni", form_data)

        assert response.status_code == 201
        assert response.json()["message"] == "เพิ่มศิษย์เก่าสำเร็จ"
        sent = backend.last_json("POST", "/alumni")
        assert sent["photo_url"].startswith("https://api.dicebear.com/7.x/avataaars/svg?seed=")
        assert sent["skills"] == ["Python", "Django"]

    def test_photo_url_is_kept(self, backend, admin_client, form_data):
        form_data["photo_url"] = "https://example.com/me.jpg"

        send(admin_client, "post", "/api/alumni", form_data)

        assert backend.last_json("POST", "/alumni")["photo_url"] == "https://example.com/me.jpg"

    def test_workplace_required_when_employed(self, admin_client, form_data):
        form_data["workplace"] = ""

        response = send(admin_client, "post", "/api/alumni", form_data)

        assert response.status_code == 400
        assert response.json()["details"]["fields"]["workplace"] == "กรุณากรอกสถานที่ทำงาน"

    def test_workplace_optional_when_seeking(self, admin_client, form_data):
        form_data["workplace"] = ""
        form_data["employment_status"] = "seeking"

        assert send(admin_client, "post", "/api/alumni", form_data).status_code == 201

    @pytest.mark.parametrize("year", [1990, date.today().year])
    def test_graduation_year_bounds_accepted(self, admin_client, form_data, year):
        form_data["graduation_year"] = year

        assert send(admin_client, "post", "/api/alumni", form_data).status_code == 201

    @pytest.mark.parametrize("year", [1989, date.today().year + 1])
    def test_graduation_year_out_of_range(self, admin_client, form_data, year):
        form_data["graduation_year"] = year

        response = send(admin_client, "post", "/api/alumni", form_data)

        assert response.status_code == 400
        assert response.json()["details"]["fields"]["graduation_year"] == "ปีที่จบไม่ถูกต้อง"

    def test_alumni_cannot_create(self, alumni_client, form_data):
        assert send(alumni_client, "post", "/api/alumni", form_data).status_code == 403


class TestUpdateAlumni:
    def test_owner_edits_own_record(self, backend, alumni_rows, alumni_client, form_data):
        form_data["alumni_id"] = "ALU000"

        response = send(alumni_client, "put", "/api/alumni/1", form_data)

        assert response.status_code == 200
        assert response.json()["message"] == "แก้ไขข้อมูลศิษย์เก่าสำเร็จ"
        assert backend.collections["alumni"][0]["first_name"] == "ปิติ"

    def test_alumni_cannot_edit_others(self, backend, alumni_rows, alumni_client, form_data):
        response = send(alumni_client, "put", "/api/alumni/2", form_data)

        assert response.status_code == 403
        assert response.json()["code"] == "NOT_OWNER"
        assert backend.requests_to("PUT", "/alumni/2") == []

    def test_alumni_without_alumni_id_cannot_edit(self, monkeypatch, backend, form_data):
        """A blank ``alumni_id`` never matches a record with a blank ``alumni_id``."""
        monkeypatch.setitem(USERS["alumni"]["profile"], "alumni_id", "")
        backend.add("alumni", AlumniFactory(id=7, alumni_id=""))
        client = make_client("alumni")

        response = send(client, "put", "/api/alumni/7", form_data)

        assert response.status_code == 403
        assert response.json()["code"] == "NOT_OWNER"
        assert backend.requests_to("PUT", "/alumni/7") == []

    def test_teacher_cannot_edit(self, alumni_rows, teacher_client, form_data):
        response = send(teacher_client, "put", "/api/alumni/2", form_data)

        assert response.status_code == 403
        assert response.json()["code"] == "PERMISSION_DENIED"

    def test_admin_edits_any_record(self, alumni_rows, admin_client, form_data):
        assert send(admin_client, "put", "/api/alumni/3", form_data).status_code == 200

    def test_missing_record(self, alumni_rows, admin_client, form_data):
        assert send(admin_client, "put", "/api/alumni/99", form_data).status_code == 404


class TestDeleteAlumni:
    def test_admin_deletes(self, backend, alumni_rows, admin_client):
        response = send(admin_client, "delete", "/api/alumni/2")

        assert response.status_code == 200
        assert [row["id"] for row in backend.collections["alumni"]] == [1, 3]

    def test_alumni_cannot_delete(self, alumni_rows, alumni_client):
        assert send(alumni_client, "delete", "/api/alumni/1").status_code == 403


class TestExport:
    def test_export(self, alumni_rows, admin_client):
        response = admin_client.get("/api/alumni/export", {"year": 2022})

        assert response.status_code == 200
        lines = response.content.decode("utf-8").splitlines()
        assert lines[0] == BOM + "รหัส,ชื่อ,นามสกุล,คณะ,สาขา,ปีที่จบ,สถานที่ทำงาน,ตำแหน่ง,ติดต่อ"
        assert lines[1].startswith("ALU001,Anan,")
        assert len(lines) == 2

    def test_export_is_admin_only(self, alumni_rows, student_client):
        assert student_client.get("/api/alumni/export").status_code == 403


class TestPortfolioImage:
    def test_png_download(self, alumni_rows, student_client):
        response = student_client.get("/api/alumni/2/portfolio.png")

        assert response.status_code == 200
        assert response["Content-Type"] == "image/png"
        assert response.content.startswith(b"\x89PNG")
        assert "Portfolio_Anan_" in response["Content-Disposition"]

    def test_missing_alumni(self, alumni_rows, student_client):
        assert student_client.get("/api/alumni/99/portfolio.png").status_code == 404

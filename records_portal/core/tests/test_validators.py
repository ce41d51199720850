"""
Tests for the shared field rules.
"""

import pytest

from records_portal.core.validators import check_first_name
from records_portal.core.validators import check_phone
from records_portal.core.validators import check_required
from records_portal.core.validators import check_student_id
from records_portal.core.validators import check_university_email


class TestStudentId:
    def test_eight_digits_accepted(self):
        assert check_student_id("66100001") == "66100001"

    @pytest.mark.parametrize("value", ["6610001", "661000012", "6610000a", "", "๖๖๑๐๐๐๐๑"])
    def test_other_values_rejected(self, value):
        with pytest.raises(ValueError, match="รหัสนักศึกษาต้องเป็นตัวเลข 8 หลัก"):
            check_student_id(value)


class TestNames:
    @pytest.mark.parametrize("value", ["สมชาย", "John", "Mary Jane", "สม ชาย"])
    def test_letters_accepted(self, value):
        assert check_first_name(value) == value

    @pytest.mark.parametrize("value", ["John3", "O'Neil", ""])
    def test_other_characters_rejected(self, value):
        with pytest.raises(ValueError, match="ชื่อต้องเป็นตัวอักษรเท่านั้น"):
            check_first_name(value)


class TestUniversityEmail:
    def test_university_address_accepted(self):
        assert check_university_email("a.b@university.ac.th") == "a.b@university.ac.th"

    @pytest.mark.parametrize("value", ["a@gmail.com", "a b@university.ac.th", "@university.ac.th"])
    def test_other_addresses_rejected(self, value):
        with pytest.raises(ValueError):
            check_university_email(value)


class TestPhone:
    def test_ten_digits_starting_with_zero_accepted(self):
        assert check_phone("0812345678") == "0812345678"

    @pytest.mark.parametrize(
        "value", ["812345678", "1812345678", "08123456789", "08-1234567", "0๘๑๒๓๔๕๖๗๘"]
    )
    def test_other_values_rejected(self, value):
        with pytest.raises(ValueError, match="เบอร์โทรต้องเป็นตัวเลข 10 หลักและขึ้นต้นด้วย 0"):
            check_phone(value)


def test_required_rejects_empty_value():
    with pytest.raises(ValueError, match="กรุณาเลือกคณะ"):
        check_required("", "กรุณาเลือกคณะ")
    assert check_required("x", "msg") == "x"

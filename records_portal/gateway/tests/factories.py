"""
Factories for records backend rows, as the REST API returns them.

Rows are plain dicts; keyword arguments override columns.
"""

import factory


class StudentFactory(factory.DictFactory):
    id = factory.Sequence(lambda n: n + 1)
    student_id = factory.Sequence(lambda n: f"6610{n + 1:04d}")
    first_name = "สมชาย"
    last_name = "ใจดี"
    faculty = "คณะเทคโนโลยีสารสนเทศ"
    department = "วิทยาการคอมพิวเตอร์"
    year = 1
    email = factory.LazyAttribute(lambda o: f"{o.student_id}@university.ac.th")
    phone = "0812345678"
    address = ""
    status = "Active"


class AlumniFactory(factory.DictFactory):
    id = factory.Sequence(lambda n: n + 1)
    alumni_id = factory.Sequence(lambda n: f"ALU{n + 1:03d}")
    first_name = "สมหญิง"
    last_name = "ศรีสุข"
    faculty = "คณะเทคโนโลยีสารสนเทศ"
    department = "วิทยาการคอมพิวเตอร์"
    graduation_year = 2020
    workplace = "Siam Software"
    position = "Software Engineer"
    contact_info = ""
    portfolio = ""
    photo_url = ""
    employment_status = "employed"
    about_me = ""
    email = ""
    address = ""
    phone = ""
    skills = factory.LazyFunction(lambda: ["Python", "SQL"])
    education = factory.LazyFunction(list)
    experience = factory.LazyFunction(list)
    custom_fields = factory.LazyFunction(list)


class AdvisorFactory(factory.DictFactory):
    id = factory.Sequence(lambda n: n + 1)
    advisor_id = factory.Sequence(lambda n: f"ADV{n + 1:03d}")
    name = factory.Sequence(lambda n: f"อาจารย์ทดสอบ {n + 1}")
    faculty = "คณะเทคโนโลยีสารสนเทศ"
    department = "วิทยาการคอมพิวเตอร์"
    email = "advisor@university.ac.th"
    phone = "0898765432"


class CommentFactory(factory.DictFactory):
    id = factory.Sequence(lambda n: n + 1)
    project_id = 1
    author_name = "สมศักดิ์ รักสอน"
    author_role = "teacher"
    message = "ดีมาก"
    created_at = "2024-05-31T10:00:00.000Z"


class ProjectFactory(factory.DictFactory):
    id = factory.Sequence(lambda n: n + 1)
    project_id = factory.Sequence(lambda n: f"PRJ{n + 1:03d}")
    title_th = "ระบบจัดการข้อมูลนักศึกษา"
    title_en = "Student Records System"
    description = "รายละเอียดโครงงาน"
    advisor = "อาจารย์ทดสอบ"
    year = 2024
    members = factory.LazyFunction(lambda: ["สมชาย ใจดี"])
    document_url = ""
    tags = factory.LazyFunction(lambda: ["Web"])
    status = "Approved"
    type = "individual"
    has_award = 0
    comments = factory.LazyFunction(list)
    created_by = None

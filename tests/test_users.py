from __future__ import annotations
from datetime import date, time
import pytest

from app import create_app
from extensions import db
from models import (
    Announcement, Department, Priority, RelatedSubject, Reminder, Schedule,
    Section, User, Weekday, Year, YearLabel,
)
from tenancy import issue_credential

MONDAY = date(2025, 9, 8)

def _tenant(sec, **kw):
    return dict(section_id=sec.id, year_id=sec.year_id, department_id=sec.department_id, **kw)

@pytest.fixture()
def app():
    app = create_app("test")
    with app.app_context():
        db.create_all()
        dept = Department(name="Information Science and Engineering")
        db.session.add(dept); db.session.flush()
        year = Year(year=YearLabel.THIRD, department_id=dept.id)
        db.session.add(year); db.session.flush()
        sec_a = Section(name="A", year_id=year.id, department_id=dept.id)
        sec_b = Section(name="B", year_id=year.id, department_id=dept.id)
        db.session.add_all([sec_a, sec_b]); db.session.flush()

        teacher = User(name="Prof. Nair", email="t@example.com", role="teacher", **_tenant(sec_a))
        student = User(name="Divya", email="s@example.com", role="student", **_tenant(sec_a))
        outsider = User(name="Vikram", email="o@example.com", role="student", **_tenant(sec_b))
        for u in (teacher, student, outsider):
            u.set_password("pass")
        db.session.add_all([teacher, student, outsider]); db.session.flush()

        def sched(subject, day, start, end, sec=sec_a, teacher_name="Prof. Nair", room="R101"):
            return Schedule(subject=subject, day=day, start_time=start, end_time=end, room=room,
                            date=MONDAY, teacher=teacher_name, **_tenant(sec, created_by_id=teacher.id))

        db.session.add_all([
            sched("Object Oriented Programming", Weekday.MONDAY, time(11, 0), time(12, 0), teacher_name=None),
            sched("Computer Networks", Weekday.MONDAY, time(9, 0), time(10, 0)),
            sched("Physics", Weekday.TUESDAY, time(9, 0), time(10, 0)),
            sched("Computer Networks", Weekday.MONDAY, time(8, 0), time(9, 0), sec=sec_b),
        ])

        def rem(title, due, done=False, sec=sec_a, **kw):
            return Reminder(title=title, date=due, time=time(17, 0), completed=done,
                            **_tenant(sec, created_by_id=teacher.id), **kw)

        db.session.add_all([
            rem("DBMS assignment", date(2025, 9, 12), priority=Priority.HIGH,
                related_to=RelatedSubject.DBMS),
            rem("Network lab", date(2025, 9, 10)),
            rem("Old quiz", date(2025, 9, 1)),
            rem("Done already", date(2025, 9, 15), done=True),
            rem("Someday", None),
            rem("Other section", date(2025, 9, 12), sec=sec_b),
        ])
        db.session.add(Announcement(title="Hello", author="Prof. Nair", **_tenant(sec_a, created_by_id=teacher.id)))
        db.session.commit()

        app.tokens = {"teacher": issue_credential(teacher), "student": issue_credential(student)}
        app.user_ids = {"teacher": teacher.id, "student": student.id, "outsider": outsider.id}
    yield app
    with app.app_context():
        db.drop_all()

@pytest.fixture()
def client(app):
    return app.test_client()

def auth(app, who="student"):
    return {"Authorization": f"Bearer {app.tokens[who]}"}

def test_stats_counts_own_section(app, client):
    r = client.get("/api/users/stats", headers=auth(app))
    assert r.status_code == 200
    assert r.get_json() == {"totalAnnouncements": 1, "totalReminders": 5, "totalSchedules": 3}

def test_enrolled_classes_for_weekday(app, client):
    r = client.get(f"/api/users/enrolled-classes?date={MONDAY.isoformat()}", headers=auth(app))
    assert r.status_code == 200
    assert r.get_json() == [
        {
            "subject": "Computer Networks", "location": "R101",
            "startTime": "2025-09-08T09:00:00", "endTime": "2025-09-08T10:00:00",
            "professor": "Prof. Nair", "icon": "BookOpen", "color": "green",
        },
        {
            "subject": "Object Oriented Programming", "location": "R101",
            "startTime": "2025-09-08T11:00:00", "endTime": "2025-09-08T12:00:00",
            "professor": "TBA", "icon": "BookOpen", "color": "indigo",
        },
    ]

def test_enrolled_classes_empty_day(app, client):
    r = client.get("/api/users/enrolled-classes?date=2025-09-14", headers=auth(app))  # Sunday
    assert r.get_json() == []

def test_enrolled_classes_default_today(app, client):
    r = client.get("/api/users/enrolled-classes", headers=auth(app))
    assert r.status_code == 200
    assert isinstance(r.get_json(), list)

def test_upcoming_assignments(app, client):
    r = client.get("/api/users/assignments/upcoming?date=2025-09-10", headers=auth(app))
    assert r.status_code == 200
    assert r.get_json() == [
        {"title": "Network lab", "subject": "Other", "dueDate": "2025-09-10", "priority": "medium"},
        {"title": "DBMS assignment", "subject": "DataBase Management System",
         "dueDate": "2025-09-12", "priority": "high"},
    ]

def test_bad_date_param(app, client):
    r = client.get("/api/users/assignments/upcoming?date=tomorrow", headers=auth(app))
    assert r.status_code == 400

def test_profile_same_section(app, client):
    r = client.get(f"/api/users/profile/{app.user_ids['teacher']}", headers=auth(app))
    assert r.status_code == 200
    js = r.get_json()
    assert js["name"] == "Prof. Nair" and js["role"] == "teacher"
    assert js["section"]["name"] == "A"
    assert js["year"]["year"] == "THIRD"
    assert "passwordHash" not in js and "password_hash" not in js

def test_profile_other_section_or_missing(app, client):
    assert client.get(f"/api/users/profile/{app.user_ids['outsider']}", headers=auth(app)).status_code == 404
    assert client.get("/api/users/profile/9999", headers=auth(app)).status_code == 404

def test_users_routes_need_token(client):
    assert client.get("/api/users/stats").status_code == 401

from __future__ import annotations
import pytest

from app import create_app
from extensions import db
from models import Department, Section, User, Year, YearLabel
from tenancy import issue_credential

@pytest.fixture()
def app():
    app = create_app("test")
    with app.app_context():
        db.create_all()
        dept = Department(name="Computer Science and Engineering")
        db.session.add(dept); db.session.flush()
        year = Year(year=YearLabel.FOURTH, department_id=dept.id)
        db.session.add(year); db.session.flush()
        sec_a = Section(name="A", year_id=year.id, department_id=dept.id)
        sec_b = Section(name="B", year_id=year.id, department_id=dept.id)
        db.session.add_all([sec_a, sec_b]); db.session.flush()

        users = {}
        for key, role, sec in [("teacher", "teacher", sec_a), ("teacher2", "teacher", sec_a),
                               ("cr", "cr", sec_a), ("student", "student", sec_a),
                               ("teacher_b", "teacher", sec_b)]:
            u = User(name=key.title(), email=f"{key}@example.com", role=role,
                     section_id=sec.id, year_id=year.id, department_id=dept.id)
            u.set_password("pass")
            db.session.add(u)
            users[key] = u
        db.session.commit()
        app.tokens = {key: issue_credential(u) for key, u in users.items()}
    yield app
    with app.app_context():
        db.drop_all()

@pytest.fixture()
def client(app):
    return app.test_client()

def auth(app, who):
    return {"Authorization": f"Bearer {app.tokens[who]}"}

def make(client, app, who="teacher", **body):
    body.setdefault("title", "Submit lab record")
    body.setdefault("time", "17:00")
    r = client.post("/api/reminders/create", json=body, headers=auth(app, who))
    assert r.status_code == 201, r.get_json()
    return r.get_json()

def test_create_defaults(app, client):
    js = make(client, app, date="2025-09-20")
    assert js["time"] == "17:00"
    assert js["date"] == "2025-09-20"
    assert js["completed"] is False
    assert js["priority"] == "medium"
    assert js["relatedTo"] == "Other"
    assert js["section"]["name"] == "A"

def test_related_subject_case_insensitive(app, client):
    js = make(client, app, relatedTo="computer networks", priority="HIGH")
    assert js["relatedTo"] == "Computer Networks"
    assert js["priority"] == "high"

def test_time_required(app, client):
    r = client.post("/api/reminders/create", json={"title": "x"}, headers=auth(app, "teacher"))
    assert r.status_code == 400
    assert "time" in r.get_json()["message"]

def test_unknown_subject_rejected(app, client):
    r = client.post("/api/reminders/create", json={"title": "x", "time": "10:00", "relatedTo": "Astrology"},
                    headers=auth(app, "teacher"))
    assert r.status_code == 400

def test_student_cannot_create(app, client):
    r = client.post("/api/reminders/create", json={"title": "x", "time": "10:00"}, headers=auth(app, "student"))
    assert r.status_code == 403

def test_list_ordered_by_date_time_id(app, client):
    c = make(client, app, date="2025-09-21", time="08:00")
    b = make(client, app, date="2025-09-20", time="18:00")
    a = make(client, app, date="2025-09-20", time="09:00")
    a2 = make(client, app, date="2025-09-20", time="09:00")
    make(client, app, who="teacher_b", date="2025-09-19")

    r = client.get("/api/reminders", headers=auth(app, "student"))
    assert [x["id"] for x in r.get_json()] == [a["id"], a2["id"], b["id"], c["id"]]

def test_pending_priority_subject(app, client):
    done = make(client, app, completed=True, priority="low", relatedTo="Cloud Computing")
    open_ = make(client, app, priority="high", relatedTo="DataBase Management System")

    r = client.get("/api/reminders/pending", headers=auth(app, "student"))
    assert [x["id"] for x in r.get_json()] == [open_["id"]]

    r = client.get("/api/reminders/priority/low", headers=auth(app, "student"))
    assert [x["id"] for x in r.get_json()] == [done["id"]]

    r = client.get("/api/reminders/subject/Cloud%20Computing", headers=auth(app, "student"))
    assert [x["id"] for x in r.get_json()] == [done["id"]]

    assert client.get("/api/reminders/priority/urgent", headers=auth(app, "student")).get_json() == []

def test_get_other_section_404(app, client):
    js = make(client, app, who="teacher_b")
    r = client.get(f"/api/reminders/{js['id']}", headers=auth(app, "student"))
    assert r.status_code == 404
    assert r.get_json()["message"] == "Reminder not found"

def test_update_marks_completed(app, client):
    js = make(client, app)
    r = client.put(f"/api/reminders/{js['id']}",
                   json={"title": js["title"], "time": "17:30", "completed": True},
                   headers=auth(app, "teacher2"))
    assert r.status_code == 200
    assert r.get_json()["completed"] is True
    assert r.get_json()["time"] == "17:30"

def test_delete_rules(app, client):
    js = make(client, app)
    assert client.delete(f"/api/reminders/{js['id']}", headers=auth(app, "teacher2")).status_code == 403
    assert client.delete(f"/api/reminders/{js['id']}", headers=auth(app, "student")).status_code == 403
    r = client.delete(f"/api/reminders/{js['id']}", headers=auth(app, "cr"))
    assert r.status_code == 200
    assert r.get_json() == {"message": "Reminder deleted successfully"}

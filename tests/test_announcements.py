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
        dept = Department(name="Information Science and Engineering")
        db.session.add(dept); db.session.flush()
        year = Year(year=YearLabel.SECOND, department_id=dept.id)
        db.session.add(year); db.session.flush()
        sections = {n: Section(name=n, year_id=year.id, department_id=dept.id) for n in ("A", "B")}
        db.session.add_all(sections.values()); db.session.flush()

        users = {}
        for key, name, role, sec in [
            ("teacher", "Prof. Nair", "teacher", "A"),
            ("teacher2", "Prof. Das", "teacher", "A"),
            ("cr", "Rohan", "cr", "A"),
            ("student", "Divya", "student", "A"),
            ("student_b", "Vikram", "student", "B"),
        ]:
            u = User(name=name, email=f"{key}@example.com", role=role,
                     section_id=sections[sec].id, year_id=year.id, department_id=dept.id)
            u.set_password("pass")
            db.session.add(u)
            users[key] = u
        db.session.commit()
        app.tokens = {key: issue_credential(u) for key, u in users.items()}
        app.user_ids = {key: u.id for key, u in users.items()}
    yield app
    with app.app_context():
        db.drop_all()

@pytest.fixture()
def client(app):
    return app.test_client()

def auth(app, who):
    return {"Authorization": f"Bearer {app.tokens[who]}"}

def post(client, app, body, who="teacher"):
    r = client.post("/api/announcements/create", json=body, headers=auth(app, who))
    assert r.status_code == 201, r.get_json()
    return r.get_json()

def test_exam_moved_scenario(app, client):
    r = client.post("/api/announcements/create",
                    json={"title": "Exam Moved", "urgent": True, "category": "exam"},
                    headers=auth(app, "teacher"))
    assert r.status_code == 201
    js = r.get_json()
    assert js["section"]["name"] == "A"
    assert js["urgent"] is True
    assert js["category"] == "exam"
    assert js["audience"] == "all"
    assert js["content"] == ""
    # display author defaults to the creator's name
    assert js["author"] == "Prof. Nair"
    assert js["createdBy"]["id"] == app.user_ids["teacher"]

def test_explicit_author_kept(app, client):
    js = post(client, app, {"title": "Fest", "content": "Friday", "author": "Cultural Committee",
                            "category": "Event", "audience": "students", "date": "2025-09-12"})
    assert js["author"] == "Cultural Committee"
    assert js["category"] == "event"
    assert js["date"] == "2025-09-12"

def test_title_required(app, client):
    r = client.post("/api/announcements/create", json={"content": "x"}, headers=auth(app, "teacher"))
    assert r.status_code == 400
    assert r.get_json()["error"] == "validation"

def test_unknown_category_rejected(app, client):
    r = client.post("/api/announcements/create", json={"title": "x", "category": "gossip"},
                    headers=auth(app, "teacher"))
    assert r.status_code == 400

def test_student_cannot_create(app, client):
    r = client.post("/api/announcements/create", json={"title": "x"}, headers=auth(app, "student"))
    assert r.status_code == 403

def test_list_newest_first_and_scoped(app, client):
    a = post(client, app, {"title": "one"})
    b = post(client, app, {"title": "two"})
    c = post(client, app, {"title": "three"}, who="cr")

    r = client.get("/api/announcements", headers=auth(app, "student"))
    assert [x["id"] for x in r.get_json()] == [c["id"], b["id"], a["id"]]
    assert client.get("/api/announcements", headers=auth(app, "student_b")).get_json() == []
    r = client.get(f"/api/announcements/{a['id']}", headers=auth(app, "student_b"))
    assert r.status_code == 404

def test_filters(app, client):
    urgent = post(client, app, {"title": "u", "urgent": True, "category": "exam", "audience": "students"})
    post(client, app, {"title": "n", "category": "event", "audience": "parents"})

    r = client.get("/api/announcements/urgent", headers=auth(app, "student"))
    assert [x["id"] for x in r.get_json()] == [urgent["id"]]

    r = client.get("/api/announcements/category/EXAM", headers=auth(app, "student"))
    assert [x["id"] for x in r.get_json()] == [urgent["id"]]

    r = client.get("/api/announcements/audience/students", headers=auth(app, "student"))
    assert [x["id"] for x in r.get_json()] == [urgent["id"]]

    assert client.get("/api/announcements/category/nonsense", headers=auth(app, "student")).get_json() == []

def test_update_by_other_teacher_keeps_author(app, client):
    js = post(client, app, {"title": "Lab closed"})
    r = client.put(f"/api/announcements/{js['id']}", json={"title": "Lab closed today", "urgent": True},
                   headers=auth(app, "teacher2"))
    assert r.status_code == 200
    upd = r.get_json()
    assert upd["title"] == "Lab closed today" and upd["urgent"] is True
    assert upd["author"] == "Prof. Nair"
    assert upd["createdBy"]["id"] == app.user_ids["teacher"]

def test_delete_checks_creator_not_author_text(app, client):
    # author text names teacher2, but the creator is teacher
    js = post(client, app, {"title": "Quiz", "author": "Prof. Das"})
    r = client.delete(f"/api/announcements/{js['id']}", headers=auth(app, "teacher2"))
    assert r.status_code == 403

    r = client.delete(f"/api/announcements/{js['id']}", headers=auth(app, "teacher"))
    assert r.status_code == 200
    assert r.get_json() == {"message": "Announcement deleted successfully"}

def test_cr_deletes_any(app, client):
    js = post(client, app, {"title": "Quiz"})
    assert client.delete(f"/api/announcements/{js['id']}", headers=auth(app, "cr")).status_code == 200
    assert client.get(f"/api/announcements/{js['id']}", headers=auth(app, "cr")).status_code == 404

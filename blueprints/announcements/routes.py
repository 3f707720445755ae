# blueprints/announcements/routes.py
from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask_login import login_required

from blueprints.auth.routes import current_context, roles_required
from models import Role
from . import services as svc
from .schemas import AnnouncementIn

bp = Blueprint("announcements", __name__)

AUTHORS = (Role.TEACHER, Role.CR)

@bp.post("/create")
@roles_required(*AUTHORS)
def create():
    data = AnnouncementIn.model_validate(request.get_json(silent=True) or {})
    return jsonify(svc.create_announcement(current_context(), data)), 201

@bp.get("/", strict_slashes=False)
@login_required
def list_all():
    return jsonify(svc.list_announcements(current_context()))

@bp.get("/<int:announcement_id>")
@login_required
def get_one(announcement_id: int):
    return jsonify(svc.get_announcement(current_context(), announcement_id))

@bp.get("/urgent")
@login_required
def urgent():
    return jsonify(svc.urgent_announcements(current_context()))

@bp.get("/category/<category>")
@login_required
def by_category(category: str):
    return jsonify(svc.announcements_by_category(current_context(), category))

@bp.get("/audience/<audience>")
@login_required
def by_audience(audience: str):
    return jsonify(svc.announcements_by_audience(current_context(), audience))

@bp.put("/<int:announcement_id>")
@roles_required(*AUTHORS)
def update(announcement_id: int):
    data = AnnouncementIn.model_validate(request.get_json(silent=True) or {})
    return jsonify(svc.update_announcement(current_context(), announcement_id, data))

@bp.delete("/<int:announcement_id>")
@roles_required(*AUTHORS)
def delete(announcement_id: int):
    svc.delete_announcement(current_context(), announcement_id)
    return jsonify({"message": "Announcement deleted successfully"})

# blueprints/reminders/routes.py
from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask_login import login_required

from blueprints.auth.routes import current_context, roles_required
from models import Role
from . import services as svc
from .schemas import ReminderIn

bp = Blueprint("reminders", __name__)

AUTHORS = (Role.TEACHER, Role.CR)

@bp.post("/create")
@roles_required(*AUTHORS)
def create():
    data = ReminderIn.model_validate(request.get_json(silent=True) or {})
    return jsonify(svc.create_reminder(current_context(), data)), 201

@bp.get("/", strict_slashes=False)
@login_required
def list_all():
    return jsonify(svc.list_reminders(current_context()))

@bp.get("/<int:reminder_id>")
@login_required
def get_one(reminder_id: int):
    return jsonify(svc.get_reminder(current_context(), reminder_id))

@bp.get("/pending")
@login_required
def pending():
    return jsonify(svc.pending_reminders(current_context()))

@bp.get("/priority/<priority>")
@login_required
def by_priority(priority: str):
    return jsonify(svc.reminders_by_priority(current_context(), priority))

@bp.get("/subject/<subject>")
@login_required
def by_subject(subject: str):
    return jsonify(svc.reminders_by_subject(current_context(), subject))

@bp.put("/<int:reminder_id>")
@roles_required(*AUTHORS)
def update(reminder_id: int):
    data = ReminderIn.model_validate(request.get_json(silent=True) or {})
    return jsonify(svc.update_reminder(current_context(), reminder_id, data))

@bp.delete("/<int:reminder_id>")
@roles_required(*AUTHORS)
def delete(reminder_id: int):
    svc.delete_reminder(current_context(), reminder_id)
    return jsonify({"message": "Reminder deleted successfully"})

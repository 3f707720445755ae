# blueprints/schedules/routes.py
from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask_login import login_required

from blueprints.auth.routes import current_context, roles_required
from models import Role
from tenancy.views import parse_iso_date
from . import services as svc
from .schemas import ScheduleIn

bp = Blueprint("schedules", __name__)

AUTHORS = (Role.TEACHER, Role.CR)

@bp.post("/create")
@roles_required(*AUTHORS)
def create():
    data = ScheduleIn.model_validate(request.get_json(silent=True) or {})
    return jsonify(svc.create_schedule(current_context(), data)), 201

@bp.get("/", strict_slashes=False)
@login_required
def list_all():
    return jsonify(svc.list_schedules(current_context()))

@bp.get("/<int:schedule_id>")
@login_required
def get_one(schedule_id: int):
    return jsonify(svc.get_schedule(current_context(), schedule_id))

@bp.get("/daily/date/<raw_date>")
@login_required
def daily(raw_date: str):
    return jsonify(svc.schedules_on_date(current_context(), parse_iso_date(raw_date)))

@bp.get("/day/<day>")
@login_required
def by_day(day: str):
    return jsonify(svc.schedules_for_day(current_context(), day))

@bp.get("/teacher/<teacher>")
@login_required
def by_teacher(teacher: str):
    return jsonify(svc.schedules_for_teacher(current_context(), teacher))

@bp.put("/<int:schedule_id>")
@roles_required(*AUTHORS)
def update(schedule_id: int):
    data = ScheduleIn.model_validate(request.get_json(silent=True) or {})
    return jsonify(svc.update_schedule(current_context(), schedule_id, data))

@bp.delete("/<int:schedule_id>")
@roles_required(*AUTHORS)
def delete(schedule_id: int):
    svc.delete_schedule(current_context(), schedule_id)
    return jsonify({"message": "Schedule deleted successfully"})

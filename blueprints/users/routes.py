# blueprints/users/routes.py
from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask_login import login_required

from blueprints.auth.routes import current_context
from tenancy.views import parse_iso_date
from . import services as svc

bp = Blueprint("users", __name__)

def _on_date():
    # ?date=YYYY-MM-DD pins "today" for the dashboard views
    raw = request.args.get("date")
    return parse_iso_date(raw) if raw else None

@bp.get("/stats")
@login_required
def stats():
    return jsonify(svc.section_stats(current_context()))

@bp.get("/enrolled-classes")
@login_required
def enrolled_classes():
    return jsonify(svc.enrolled_classes(current_context(), _on_date()))

@bp.get("/assignments/upcoming")
@login_required
def upcoming_assignments():
    return jsonify(svc.upcoming_assignments(current_context(), _on_date()))

@bp.get("/profile/<int:user_id>")
@login_required
def profile(user_id: int):
    return jsonify(svc.user_profile(current_context(), user_id))

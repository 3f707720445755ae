# blueprints/auth/routes.py
from __future__ import annotations
from functools import wraps
from typing import Callable, Optional

from flask import Blueprint, request, jsonify
from flask_login import login_required, current_user

from errors import Forbidden, Unauthenticated
from extensions import login_manager
from tenancy import TenantContext, bearer_token, resolve_credential
from . import services as svc
from .schemas import LoginIn, RegisterIn

bp = Blueprint("auth", __name__)

# ---------- bearer credential -> current_user ----------
@login_manager.request_loader
def load_user_from_request(req) -> Optional[TenantContext]:
    token = bearer_token(req.headers.get("Authorization"))
    if token is None:
        return None
    try:
        return resolve_credential(token)
    except Unauthenticated:
        return None

@login_manager.unauthorized_handler
def _unauth():
    has_header = bool(request.headers.get("Authorization"))
    err = Unauthenticated("Invalid token" if has_header else "No token provided")
    return jsonify(err.to_dict()), err.status

# ---------- role decorators ----------
def roles_required(*roles: str):
    allowed = {getattr(r, "value", r) for r in roles}

    def decorator(fn: Callable):
        @wraps(fn)
        @login_required
        def wrapper(*args, **kwargs):
            if getattr(current_user, "role", None) not in allowed:
                raise Forbidden("Access Denied")
            return fn(*args, **kwargs)
        return wrapper
    return decorator

def current_context() -> TenantContext:
    # login_required has already run, so this is never the anonymous user
    return current_user._get_current_object()

# ---------- API ----------
@bp.post("/register")
def api_register():
    payload = request.get_json(silent=True) or {}
    data = RegisterIn.model_validate(payload)
    out = svc.register_user(data)
    return jsonify(out.dump()), 201

@bp.post("/login")
def api_login():
    payload = request.get_json(silent=True)
    if payload is None:
        payload = request.form.to_dict()
    data = LoginIn.model_validate(payload)
    ip = request.headers.get("X-Forwarded-For", request.remote_addr or "0.0.0.0").split(",")[0].strip()
    out = svc.authenticate(data, client_ip=ip)
    return jsonify(out.dump())

@bp.get("/me")
@login_required
def api_me():
    return jsonify(current_context().to_dict())

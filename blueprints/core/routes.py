from __future__ import annotations
import json, logging
from datetime import datetime, timezone

from flask import current_app, g, jsonify, request
from flask_login import current_user
from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.exceptions import HTTPException
from werkzeug.wrappers.response import Response

from errors import ApiError, Conflict, Internal, ValidationFailed
from extensions import db

from . import bp

log = logging.getLogger(__name__)

def _iso_utc(timespec: str) -> str:
    return datetime.now(timezone.utc).isoformat(timespec=timespec).replace("+00:00", "Z")

class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": _iso_utc("milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in ("event", "path", "method", "status", "duration_ms", "user_id"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

def _setup_structured_logging(app):
    logger = app.logger
    has_json = any(
        isinstance(h, logging.StreamHandler)
        and isinstance(getattr(h, "formatter", None), JSONFormatter)
        for h in logger.handlers
    )
    if not has_json:
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

# ---------- request log ----------
@bp.before_app_request
def _start_timer():
    g._req_start = datetime.now(timezone.utc)

@bp.after_app_request
def _log_request(response: Response):
    try:
        duration_ms = int((datetime.now(timezone.utc) - g._req_start).total_seconds() * 1000)
    except AttributeError:
        duration_ms = None
    user_id = current_user.get_id() if current_user and current_user.is_authenticated else None
    extra = {
        "event": "http_request",
        "path": request.path,
        "method": request.method,
        "status": response.status_code,
        "duration_ms": duration_ms,
        "user_id": user_id,
    }
    current_app.logger.info("request handled", extra=extra)
    return response

# ---------- errors -> {"error", "message"} ----------
def _error_response(err: ApiError):
    return jsonify(err.to_dict()), err.status

@bp.app_errorhandler(ApiError)
def _api_error(err: ApiError):
    if err.status >= 500:
        log.error("api error: %s", err.message)
    return _error_response(err)

def _pydantic_errors_safe(ve: ValidationError):
    errs = ve.errors(include_url=False)
    for e in errs:
        if "ctx" in e and isinstance(e["ctx"], dict):
            e["ctx"] = {k: str(v) for k, v in e["ctx"].items()}
        e.pop("input", None)
    return errs

@bp.app_errorhandler(ValidationError)
def _validation_error(ve: ValidationError):
    missing = [".".join(map(str, e["loc"])) for e in ve.errors() if e["type"] == "missing"]
    msg = "Missing required fields: " + ", ".join(missing) if missing else "Invalid request data"
    return _error_response(ValidationFailed(msg, detail=_pydantic_errors_safe(ve)))

@bp.app_errorhandler(IntegrityError)
def _integrity_error(ex: IntegrityError):
    db.session.rollback()
    log.warning("integrity error: %s", getattr(ex, "orig", ex))
    return _error_response(Conflict())

@bp.app_errorhandler(HTTPException)
def _http_error(ex: HTTPException):
    body = {"error": (ex.name or "error").lower().replace(" ", "_"), "message": ex.description}
    return jsonify(body), ex.code or 500

@bp.app_errorhandler(Exception)
def _unexpected(ex: Exception):
    db.session.rollback()
    log.exception("unhandled error on %s %s", request.method, request.path)
    return _error_response(Internal())

@bp.record_once
def _on_register(state):
    _setup_structured_logging(state.app)

# ---------- health ----------
@bp.get("/health")
def health():
    try:
        db.session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError:
        log.exception("health check: database unreachable")
        database = "unavailable"
    return jsonify({
        "status": "ok" if database == "ok" else "degraded",
        "database": database,
        "ts": _iso_utc("seconds"),
    }), (200 if database == "ok" else 503)

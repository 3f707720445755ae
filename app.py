from __future__ import annotations
import os
from importlib import import_module
from flask import Flask
from config import config_map
from extensions import db, migrate, login_manager, cors

def register_blueprints(app: Flask) -> None:
    # core registers the JSON error handlers and the request log on import
    import_module("blueprints.core.routes")
    from blueprints.core import bp as core_bp
    from blueprints.auth.routes import bp as auth_bp
    from blueprints.schedules.routes import bp as schedules_bp
    from blueprints.announcements.routes import bp as announcements_bp
    from blueprints.reminders.routes import bp as reminders_bp
    from blueprints.users.routes import bp as users_bp

    # core without prefix -> '/health' at the root
    app.register_blueprint(core_bp)
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(schedules_bp, url_prefix="/api/schedules")
    app.register_blueprint(announcements_bp, url_prefix="/api/announcements")
    app.register_blueprint(reminders_bp, url_prefix="/api/reminders")
    app.register_blueprint(users_bp, url_prefix="/api/users")

def create_app(config_name: str | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    cfg_name = config_name or os.getenv("FLASK_CONFIG", "default")
    app.config.from_object(config_map[cfg_name])
    # pytest sets PYTEST_CURRENT_TEST; keep every app on its own in-memory DB there
    if os.environ.get("PYTEST_CURRENT_TEST"):
        app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite:///:memory:"
        app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", {"connect_args": {"check_same_thread": False}})
    app.json.sort_keys = False

    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        pass
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    cors.init_app(app, origins=app.config["CORS_ORIGINS"], supports_credentials=True)

    import models  # noqa: F401  (populate metadata for create_all / migrate)
    register_blueprints(app)
    return app

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_login import LoginManager
from flask_cors import CORS

db = SQLAlchemy()
migrate = Migrate()
cors = CORS()
login_manager = LoginManager()
# bearer tokens only, no cookie session to protect
login_manager.session_protection = None

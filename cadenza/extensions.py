"""Flask extension instances, bound to the app in the factory."""
from authlib.integrations.flask_client import OAuth
from flask_babel import Babel
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
babel = Babel()
cors = CORS()
oauth = OAuth()

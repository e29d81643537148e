"""Routes package - Blueprint registration."""
from cadenza.routes.main import main_bp
from cadenza.routes.auth import auth_bp
from cadenza.routes.users import users_bp
from cadenza.routes.companies import companies_bp
from cadenza.routes.people import people_bp
from cadenza.routes.blogs import blogs_bp
from cadenza.routes.images import images_bp


def register_blueprints(app):
    """Register all blueprints with the Flask app."""
    app.register_blueprint(auth_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(companies_bp)
    app.register_blueprint(people_bp)
    app.register_blueprint(blogs_bp)
    app.register_blueprint(images_bp)
    app.register_blueprint(main_bp)

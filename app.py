from flask import Flask
from flask_login import LoginManager
from sqlalchemy.engine import make_url
import logging

from config import load_config, get_server_config
from database import init_db
from errors import register_error_handlers
from models import db, AdminUser
from utils import register_jinja_filters
from routes import main_bp
from admin_routes import admin_bp

login_manager = LoginManager()
login_manager.login_view = 'admin.login'

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'SAMEORIGIN',
    'Referrer-Policy': 'no-referrer',
}


@login_manager.user_loader
def load_user(user_id):
    """Resolve the session's user id. Only the literal 'admin' identity exists."""
    if user_id == AdminUser.id:
        return AdminUser()
    return None


def create_app(config_overrides=None):
    """Build the Flask app.

    Raises config.ConfigError when the session secret or admin password
    is not configured.
    """
    app = Flask(__name__, static_url_path='/static')
    app.config.update(load_config(config_overrides))

    db_url = make_url(app.config['SQLALCHEMY_DATABASE_URI'])
    logging.info(f"Using database: {db_url.render_as_string(hide_password=True)}")

    # Initialize extensions
    register_jinja_filters(app)
    register_error_handlers(app)
    db.init_app(app)
    login_manager.init_app(app)

    @app.after_request
    def _security_headers(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    app.register_blueprint(main_bp)
    app.register_blueprint(admin_bp)

    # Create database tables if they don't exist
    init_db(app)
    return app


if __name__ == '__main__':
    server = get_server_config()
    create_app().run(host=server['host'], port=server['port'], debug=server['debug'])

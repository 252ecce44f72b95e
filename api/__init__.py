from flask import Flask
from flasgger import Swagger
from flask_cors import CORS
import logging

from .config import get_config, API_VERSION
from .errors import register_error_handlers
from models import storage  # DBStorage singleton (scoped_session)
from utils.security import TokenCodec, TokenSettings

# Minimal Swagger config: exposes /swagger.json and UI at /apidocs
SWAGGER_TEMPLATE = {
    "swagger": "2.0",
    "info": {
        "title": "Post API",
        "version": API_VERSION,
        "description": "REST API for users, posts, follows and profiles.",
    },
    "basePath": "/",  # blueprints are mounted under /api
    "schemes": ["http"],
    "securityDefinitions": {
        "Bearer": {
            "type": "apiKey",
            "name": "Authorization",
            "in": "header",
            "description": "Enter the token with the `Bearer ` prefix, e.g. \"Bearer abcde12345\"."
        }
    }
}

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec_1",
            "route": "/swagger.json",
            "rule_filter": lambda rule: True,   # include all endpoints
            "model_filter": lambda tag: True,   # include all models
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/apidocs/",
}


def create_app(config_name: str | None = None, **overrides) -> Flask:
    """
    Application factory: creates and configures the Flask app.
    `overrides` are applied on top of the selected config class (handy in tests).
    """
    app = Flask(__name__)

    app.config.from_object(get_config(config_name))
    app.config.update(overrides)

    if app.debug:
        logging.basicConfig(level=logging.DEBUG)

    # Cross-Origin Resource Sharing: enable for dev, configurable for prod
    CORS(app, resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    # Swagger UI and JSON
    Swagger(app, template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)

    # Uniform error envelope
    register_error_handlers(app)

    # One codec per app; settings are frozen here and never change afterwards
    app.extensions["token_codec"] = TokenCodec(TokenSettings.from_config(app.config))

    storage.reload(app.config["DATABASE_URL"], echo=app.config.get("SQLALCHEMY_ECHO", False))

    from .health import bp as health_bp
    from .auth import bp as auth_bp
    from .users import bp as users_bp
    from .posts import bp as posts_bp
    from .follows import bp as follows_bp
    from .profiles import bp as profiles_bp

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(users_bp, url_prefix="/api")
    app.register_blueprint(posts_bp, url_prefix="/api")
    app.register_blueprint(follows_bp, url_prefix="/api")
    app.register_blueprint(profiles_bp, url_prefix="/api")

    # Ensure the DB session is removed at the end of each request/app context
    @app.teardown_appcontext
    def remove_session(exception=None):
        storage.close()

    @app.route("/")
    def root():
        return {
            "message": "Welcome to Post API",
            "docs": "/apidocs/",
            "health": "/api/health",
        }, 200

    return app

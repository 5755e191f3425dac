import logging
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException
from smms.config import Config
from smms.database import init_db
from smms.extensions import mongo, bcrypt, login_manager, cors
from smms.routes.auth import user  # noqa: F401  registers the user loader
from smms.routes.auth.auth import router as auth_router
from smms.routes.courses.subjects import router as subjects_router
from smms.routes.courses.materials import router as materials_router
from smms.routes.quizassign.quizzes import router as quizzes_router
from smms.routes.quizassign.submission import router as submission_router
from smms.routes.quizassign.faculty_view import router as faculty_router
from smms.routes.quizassign.student_view import router as student_router

logger = logging.getLogger(__name__)


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    mongo.init_app(app)
    bcrypt.init_app(app)
    login_manager.init_app(app)
    cors.init_app(app, origins=app.config["CORS_ORIGINS"], supports_credentials=True)

    # Register blueprints from all routes
    app.register_blueprint(auth_router)
    app.register_blueprint(subjects_router)
    app.register_blueprint(materials_router)
    app.register_blueprint(quizzes_router)
    app.register_blueprint(submission_router)
    app.register_blueprint(faculty_router)
    app.register_blueprint(student_router)

    @app.route("/", methods=["GET"])
    def root():
        return jsonify({"success": True, "message": "Backend is running"})

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"success": False, "message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.error(f"Unhandled error on {request.method} {request.path}: {str(e)}", exc_info=True)
        return jsonify({"success": False, "message": "Internal server error."}), 500

    if app.config["SEED_ON_STARTUP"]:
        with app.app_context():
            init_db()

    return app


if __name__ == "__main__":
    app = create_app()
    logger.info("SMMS server listening at http://127.0.0.1:%s", app.config["PORT"])
    app.run(host="0.0.0.0", port=app.config["PORT"])

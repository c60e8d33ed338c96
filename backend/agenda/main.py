import logging
from typing import Optional

from flask import Flask

from .controllers.appointment_controller import appointment_bp
from .controllers.index_controller import index_bp
from .controllers.user_controller import user_bp
from .core.api_utils import register_error_handlers
from .core.config import Settings, get_settings, log_timezone_config
from .core.logging_config import setup_logging
from .domain.interfaces import IAppointmentRepository, IUserRepository
from .repositories.appointment_repo import InMemoryAppointmentRepository
from .repositories.user_repo import InMemoryUserRepository
from .services.appointment_service import AppointmentService
from .services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    user_repo: Optional[IUserRepository] = None,
    appointment_repo: Optional[IAppointmentRepository] = None,
) -> Flask:
    """Build the Flask application.

    Repositories default to fresh in-memory stores; tests and future
    persistent backends can inject their own implementations.
    """
    settings = settings or get_settings()

    app = Flask(__name__)
    app.config["TESTING"] = settings.testing
    app.json.sort_keys = False

    setup_logging(
        app,
        log_level=settings.log_level,
        log_to_file=settings.log_to_file,
        use_json_format=settings.log_json,
        log_dir=settings.log_dir,
    )
    log_timezone_config()

    # Wire services once per application; the stores live as long as the app
    app.extensions["agenda.user_service"] = UserService(
        user_repo or InMemoryUserRepository()
    )
    app.extensions["agenda.appointment_service"] = AppointmentService(
        appointment_repo or InMemoryAppointmentRepository()
    )

    app.register_blueprint(index_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(appointment_bp)

    register_error_handlers(app)

    logger.info(
        "Application created",
        extra={"context": {"testing": settings.testing, "port": settings.port}},
    )
    return app

import logging

from flask import Flask
from flask.logging import default_handler

from .config import Config
from .controllers.commands import bp as commands_bp
from .services.common import init_store


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    pkg_logger = logging.getLogger(__name__)
    pkg_logger.setLevel(app.config["LOG_LEVEL"])
    if default_handler not in pkg_logger.handlers:
        pkg_logger.addHandler(default_handler)

    init_store(app)  # empty until a command loads the data file
    app.register_blueprint(commands_bp)

    return app

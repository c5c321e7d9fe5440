import logging

import flask

from urihelper import settings
from urihelper.navigation_routes import navigation_bp
from urihelper.services.host_bridge import HttpHostBridge
from urihelper.uri_helper import UriHelper

logger = logging.getLogger(__name__)


def create_app(bridge=None, state=None):
    """
    Build the Flask app the host reports navigation events to.
    Without a bridge, host functions are invoked over HTTP at
    HOST_BRIDGE_URL.
    """
    app = flask.Flask(__name__)

    if bridge is None:
        logger.info("[bridge] using host bridge at %s", settings.HOST_BRIDGE_URL)
        bridge = HttpHostBridge()

    app.extensions["uri_helper"] = UriHelper(bridge, state)
    app.register_blueprint(navigation_bp)
    return app


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    create_app().run()

from flask import Blueprint, current_app, jsonify, request

from urihelper.errors import ConfigurationError, InvalidArgument


navigation_bp = Blueprint(
    "navigation", __name__, url_prefix="/_navigation"
)


def get_uri_helper():
    return current_app.extensions["uri_helper"]


@navigation_bp.errorhandler(ConfigurationError)
def handle_configuration_error(e):
    return jsonify({"error": str(e)}), 500


@navigation_bp.errorhandler(InvalidArgument)
def handle_invalid_argument(e):
    return jsonify({"error": str(e)}), 400


@navigation_bp.route("/location-changed", methods=["POST"])
def location_changed():
    """Called by the host whenever the browsing context navigates."""
    body = request.get_json(silent=True) or {}
    new_uri = body.get("uri")
    if not isinstance(new_uri, str):
        return jsonify({"error": "Expected a JSON body with a 'uri' string"}), 400

    get_uri_helper().dispatch(new_uri)
    return ("", 204)


@navigation_bp.route("/state")
def navigation_state():
    uri_helper = get_uri_helper()
    absolute_uri = uri_helper.get_absolute_uri()
    base_uri_prefix = uri_helper.get_base_uri_prefix()

    try:
        relative_path = uri_helper.to_base_relative_path(
            base_uri_prefix, absolute_uri
        )
    except InvalidArgument:
        relative_path = None

    return jsonify(
        {
            "absolute_uri": absolute_uri,
            "base_uri_prefix": base_uri_prefix,
            "relative_path": relative_path,
            "interception_armed": uri_helper.interception_armed,
        }
    )

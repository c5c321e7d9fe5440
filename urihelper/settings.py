import os

import dotenv

for key, value in os.environ.items():
    if key.startswith("FLASK_"):
        # Set environment variable without the 'FLASK_' prefix
        os.environ[key[6:]] = value

dotenv.load_dotenv(".env")
dotenv.load_dotenv(".env.local", override=True)


def sanitize_env(env_var):
    """Remove escape slashes and string environment variables"""
    if env_var is not None:
        return env_var.replace("\\n", "\n").replace('"', "")


HOST_BRIDGE_URL = sanitize_env(
    os.getenv("HOST_BRIDGE_URL", "http://localhost:8042")
)
HOST_BRIDGE_TLS_CA = os.getenv("HOST_BRIDGE_TLS_CA")
HOST_BRIDGE_TIMEOUT = float(os.getenv("HOST_BRIDGE_TIMEOUT", "10"))
# Host functions are registered under the helper's qualified class name.
FUNCTION_PREFIX = sanitize_env(
    os.getenv("FUNCTION_PREFIX", "urihelper.uri_helper.UriHelper")
)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

import math

# Environment variables
ENV_DOCKER_HOST = "DOCKER_HOST"
ENV_DOCKER_API_VERSION = "DOCKER_API_VERSION"
ENV_DOCKER_CLIENT_TIMEOUT = "DOCKER_CLIENT_TIMEOUT"
ENV_DOCKER_TLS_VERIFY = "DOCKER_TLS_VERIFY"
ENV_DOCKER_CERT_PATH = "DOCKER_CERT_PATH"
ENV_DOCKER_DEBUG = "DOCKER_DEBUG"

# Headers
HEADER_USER_AGENT = "User-Agent"
HEADER_CONTENT_TYPE = "Content-Type"
USER_AGENT = "dockwire"

# Endpoints
DEFAULT_ENDPOINT = "unix:///var/run/docker.sock"
UNIX_SOCKET_BASE_URL = "http://localhost"

# Timeouts, in seconds
DEFAULT_TIMEOUT = 100.0
DEFAULT_TRANSPORT_TIMEOUT = 120.0
INFINITE_TIMEOUT = math.inf

# Redirects
DEFAULT_MAX_REDIRECTS = 20

# TLS material file names inside DOCKER_CERT_PATH
CERT_FILE_NAME = "cert.pem"
KEY_FILE_NAME = "key.pem"
CA_FILE_NAME = "ca.pem"

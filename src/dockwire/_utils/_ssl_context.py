import os
import ssl
from typing import Optional


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    path = os.path.expandvars(path)
    path = os.path.expanduser(path)
    return path


def create_ssl_context(ca_file: Optional[str] = None) -> ssl.SSLContext:
    """Create the context used to verify the daemon.

    An explicit `ca_file` (the DOCKER_CERT_PATH/ca.pem of a TLS daemon) wins.
    Otherwise the system trust store is used, falling back to the
    SSL_CERT_FILE / REQUESTS_CA_BUNDLE / SSL_CERT_DIR variables and certifi.
    """
    if ca_file:
        return ssl.create_default_context(cafile=expand_path(ca_file))

    # Try truststore first (system certificates)
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)  # type: ignore[return-value]
    except ImportError:
        import certifi

        ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
        requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
        ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )

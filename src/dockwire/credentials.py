import ssl
from abc import ABC, abstractmethod
from logging import getLogger
from typing import Callable, Optional

import httpx

from ._transport import TransportHandler
from ._utils._ssl_context import create_ssl_context, expand_path
from ._utils.constants import DEFAULT_MAX_REDIRECTS
from .models.errors import DockerCertificateRejectedError

logger = getLogger("dockwire")

ServerCertificateValidationCallback = Callable[[Optional[str], Optional[bytes]], bool]


class Credentials(ABC):
    """Transport security strategy for a DockerClient.

    Credentials decide whether the daemon is reached over TLS and configure the
    transport handler before the client's single AsyncClient is built.
    """

    @abstractmethod
    def is_tls_credentials(self) -> bool: ...

    @abstractmethod
    def get_handler(self, handler: TransportHandler) -> TransportHandler: ...

    def close(self) -> None:
        pass


class AnonymousCredentials(Credentials):
    def is_tls_credentials(self) -> bool:
        return False

    def get_handler(self, handler: TransportHandler) -> TransportHandler:
        return handler


class BasicAuthCredentials(Credentials):
    """HTTP basic authentication, typically for a daemon behind a reverse proxy."""

    def __init__(self, username: str, password: str, is_tls: bool = False) -> None:
        self._username = username
        self._password = password
        self._is_tls = is_tls

    def is_tls_credentials(self) -> bool:
        return self._is_tls

    def get_handler(self, handler: TransportHandler) -> TransportHandler:
        handler.auth = httpx.BasicAuth(self._username, self._password)
        return handler

    def __repr__(self) -> str:
        return f"BasicAuthCredentials(username={self._username!r}, is_tls={self._is_tls!r})"


class CertificateCredentials(Credentials):
    """Mutual TLS with a client certificate.

    Args:
        cert_file: PEM client certificate (may also contain the key).
        key_file: PEM private key, when not bundled in `cert_file`.
        password: Password of the private key, if encrypted.
        ca_file: CA bundle used to verify the daemon. Defaults to the system
            trust store.
        server_certificate_validation_callback: When set, replaces the built-in
            server verification. Called when the TLS handshake completes with
            the server host name and the daemon certificate in DER form (None
            when the daemon sent none); returning False aborts the connection
            before any request data is sent.
        minimum_tls_version: Lowest accepted protocol version.
        maximum_tls_version: Highest accepted protocol version.
    """

    def __init__(
        self,
        cert_file: str,
        key_file: Optional[str] = None,
        password: Optional[str] = None,
        ca_file: Optional[str] = None,
        server_certificate_validation_callback: Optional[
            ServerCertificateValidationCallback
        ] = None,
        minimum_tls_version: ssl.TLSVersion = ssl.TLSVersion.TLSv1_2,
        maximum_tls_version: ssl.TLSVersion = ssl.TLSVersion.MAXIMUM_SUPPORTED,
    ) -> None:
        self._cert_file = cert_file
        self._key_file = key_file
        self._password = password
        self._ca_file = ca_file
        self.server_certificate_validation_callback = (
            server_certificate_validation_callback
        )
        self.minimum_tls_version = minimum_tls_version
        self.maximum_tls_version = maximum_tls_version

    def is_tls_credentials(self) -> bool:
        return True

    def _create_ssl_context(self) -> ssl.SSLContext:
        callback = self.server_certificate_validation_callback
        if callback is None:
            context = create_ssl_context(self._ca_file)
        else:
            # the callback replaces chain and hostname verification
            context = CallbackValidatingSSLContext(ssl.PROTOCOL_TLS_CLIENT)
            context.server_certificate_validation_callback = callback
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE

        context.load_cert_chain(
            certfile=expand_path(self._cert_file),
            keyfile=expand_path(self._key_file),
            password=self._password,
        )
        context.verify_flags &= ~(
            ssl.VERIFY_CRL_CHECK_LEAF | ssl.VERIFY_CRL_CHECK_CHAIN
        )
        context.minimum_version = self.minimum_tls_version
        context.maximum_version = self.maximum_tls_version
        return context

    def get_handler(self, handler: TransportHandler) -> TransportHandler:
        handler.verify = self._create_ssl_context()
        handler.trust_env = False
        handler.proxy = None
        handler.follow_redirects = True
        handler.max_redirects = DEFAULT_MAX_REDIRECTS
        return handler


class CallbackValidatingSSLObject(ssl.SSLObject):
    """SSLObject that lets the context's callback accept or reject the peer.

    The check runs as soon as the handshake completes, before any application
    data is written on the connection.
    """

    def do_handshake(self) -> None:
        super().do_handshake()

        callback = getattr(self.context, "server_certificate_validation_callback", None)
        if callback is None:
            return
        if callback(self.server_hostname, self.getpeercert(binary_form=True)):
            return

        logger.warning(f"Server certificate rejected for {self.server_hostname}")
        raise DockerCertificateRejectedError(
            f"Server certificate for {self.server_hostname} was rejected"
        )


class CallbackValidatingSSLContext(ssl.SSLContext):
    sslobject_class = CallbackValidatingSSLObject
    server_certificate_validation_callback: Optional[
        ServerCertificateValidationCallback
    ] = None

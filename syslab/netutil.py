"""Client and listening sockets over whichever address family works."""

from __future__ import annotations

import socket

LISTENQ = 1024


def open_clientfd(hostname: str, port: str | int) -> socket.socket:
    """Connect to ``hostname`` on the numeric ``port`` and return the socket.

    Each address the name resolves to is tried in turn. Raises
    socket.gaierror when the name cannot be resolved, and the last
    connection error when no address accepts the connection.
    """
    flags = socket.AI_NUMERICSERV | socket.AI_ADDRCONFIG
    infos = socket.getaddrinfo(hostname, port, type=socket.SOCK_STREAM, flags=flags)
    last_error: OSError | None = None
    for family, socktype, proto, _canonname, addr in infos:
        try:
            sock = socket.socket(family, socktype, proto)
        except OSError as exc:
            last_error = exc
            continue
        try:
            sock.connect(addr)
        except OSError as exc:
            sock.close()
            last_error = exc
            continue
        return sock
    if last_error is not None:
        raise last_error
    raise OSError(f"no address to connect to for {hostname}:{port}")


def open_listenfd(port: str | int) -> socket.socket:
    """Return a socket listening on the numeric ``port`` of any local address.

    Raises socket.gaierror for a port that cannot be resolved and OSError
    when no address can be bound or listened on.
    """
    flags = socket.AI_PASSIVE | socket.AI_ADDRCONFIG | socket.AI_NUMERICSERV
    infos = socket.getaddrinfo(None, port, type=socket.SOCK_STREAM, flags=flags)
    last_error: OSError | None = None
    for family, socktype, proto, _canonname, addr in infos:
        try:
            sock = socket.socket(family, socktype, proto)
        except OSError as exc:
            last_error = exc
            continue
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind(addr)
        except OSError as exc:
            sock.close()
            last_error = exc
            continue
        try:
            sock.listen(LISTENQ)
        except OSError:
            sock.close()
            raise
        return sock
    if last_error is not None:
        raise last_error
    raise OSError(f"no address to listen on for port {port}")
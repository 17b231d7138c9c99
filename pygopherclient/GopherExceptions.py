from __future__ import annotations

import typing

from pygopherclient import logger

if typing.TYPE_CHECKING:
    from pygopherclient.client import GopherClient


tracebacks = 0


def log(
    exception: Exception,
    client: typing.Optional[GopherClient] = None,
):
    """Logs an exception.  It will try to generate a nice-looking string
    based on the arguments passed in."""
    clientstr = "None"
    address = "unknown-address"
    exceptionclass = type(exception).__name__
    if client:
        clientstr = type(client).__name__
        address = "%s:%d" % (client.host, client.port)

    logger.log(
        "%s [%s] EXCEPTION %s: %s"
        % (address, clientstr, exceptionclass, str(exception))
    )


def init(backtraceenabled):
    global tracebacks
    tracebacks = backtraceenabled


class GopherError(Exception):
    """Base class for everything that can go wrong while decoding a
    server response.  Errors log themselves when raised."""

    def __init__(self, client: typing.Optional[GopherClient] = None):
        self.client = client
        super().__init__(str(self))
        log(self, self.client)


class UnexpectedEndOfStream(GopherError, EOFError):
    def __init__(self, field: str = "", client=None):
        self.field = field
        super().__init__(client)

    def __str__(self):
        retval = "connection closed before the menu was complete"
        if self.field:
            retval += " (while reading %s)" % self.field
        return retval


class InvalidEncoding(GopherError, ValueError):
    def __init__(self, field: str, byte: int, client=None):
        self.field = field
        self.byte = byte
        super().__init__(client)

    def __str__(self):
        return "%s field contains non-ASCII byte 0x%02x" % (self.field, self.byte)


class InvalidPort(GopherError, ValueError):
    def __init__(self, port: str, client=None):
        self.port = port
        super().__init__(client)

    def __str__(self):
        return "'%s' is not a valid port number" % self.port

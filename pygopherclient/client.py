# pygopherclient -- Gopher protocol client in Python
# module: network client
# Copyright (C) 2021 Michael Lazar
# Copyright (C) 2002 John Goerzen
# <jgoerzen@complete.org>
#
#    This program is free software; you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation; version 2 of the License.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with this program; if not, write to the Free Software
#    Foundation, Inc., 59 Temple Place, Suite 330, Boston, MA  02111-1307  USA
from __future__ import annotations

import socket
import typing

from pygopherclient import GopherExceptions, logger
from pygopherclient.gopherentry import DirectoryEntry
from pygopherclient.parser import MenuParser

DEFAULT_PORT = 70
CRLF = b"\r\n"
TAB = b"\t"


class GopherClient:
    """A client which knows the host and port of a Gopher server.

    Gopher is connectionless: every fetch opens a new connection, sends a
    single selector and reads the reply until the server is done.  Nothing
    is shared between calls, so separate threads should simply use
    separate clients.

    connect is called as connect((host, port)) and must return a socket
    like object.  It defaults to socket.create_connection; pass a
    functools.partial of it to set a timeout or source address."""

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        connect: typing.Callable[..., socket.socket] = socket.create_connection,
    ):
        self.host = host
        self.port = port
        self.connect = connect

    def __repr__(self):
        return "%s(%r, %d)" % (type(self).__name__, self.host, self.port)

    def log(self, request: bytes) -> None:
        """Log an outgoing request."""
        logger.log(
            "%s:%d [%s]: %s"
            % (
                self.host,
                self.port,
                type(self).__name__,
                request.decode(errors="surrogateescape"),
            )
        )

    def fetch_root(self) -> typing.List[DirectoryEntry]:
        """List all entries at the root of the server."""
        return self.fetch_directory(b"")

    def fetch_directory(self, selector: bytes) -> typing.List[DirectoryEntry]:
        """List all entries of the menu named by selector."""
        return self.request(selector)

    def fetch_search(self, selector: bytes, query: bytes) -> typing.List[DirectoryEntry]:
        """Run a type 7 search; the result is a menu like any other."""
        return self.request(selector + TAB + query)

    def request(self, request: bytes) -> typing.List[DirectoryEntry]:
        self.log(request)
        try:
            sock = self.connect((self.host, self.port))
        except OSError as e:
            GopherExceptions.log(e, self)
            raise

        try:
            sock.sendall(request + CRLF)
            with sock.makefile("rb") as rfile:
                return MenuParser(rfile, self).parse_menu()
        except OSError as e:
            GopherExceptions.log(e, self)
            raise
        finally:
            sock.close()

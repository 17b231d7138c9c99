# pygopherclient -- Gopher protocol client in Python
# module: RFC 1436 menu parser
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

import io
import re
import typing

from pygopherclient.GopherExceptions import (
    InvalidEncoding,
    InvalidPort,
    UnexpectedEndOfStream,
)
from pygopherclient.gopherentry import DirectoryEntry, classify

if typing.TYPE_CHECKING:
    from pygopherclient.client import GopherClient

TAB = ord("\t")
CR = ord("\r")
LF = ord("\n")
PERIOD = ord(".")

portre = re.compile(rb"[0-9]+")


class MenuParser:
    """Decodes a Gopher menu from a binary file object, one byte at a time.

    rfile only needs a read(1) method that returns b"" once the server
    closes the connection.  The parser keeps its own single byte of
    lookahead so that a bare CR inside a field can be told apart from the
    CRLF ending the line without consuming the LF.

    Lines are not resynchronised.  A blank CRLF line inside a menu is read
    as a record whose type byte is CR, and the LF then ends up at the start
    of that record's display text."""

    def __init__(
        self,
        rfile: io.BufferedIOBase,
        client: typing.Optional[GopherClient] = None,
    ):
        self.rfile = rfile
        self.client = client
        self.lookahead: typing.Optional[int] = None
        # None until the first byte of the next record is needed.
        self.byte: typing.Optional[int] = None
        # Set when the last field read was ended by CRLF rather than a tab.
        self.eol = False
        # Name of the part of the record being read, for error messages.
        self.reading = "type"

    def readbyte(self) -> int:
        data = self.rfile.read(1)
        if not data:
            raise UnexpectedEndOfStream(self.reading, client=self.client)
        return data[0]

    def peek(self) -> int:
        if self.lookahead is None:
            self.lookahead = self.readbyte()
        return self.lookahead

    def bump(self) -> None:
        if self.lookahead is not None:
            self.byte, self.lookahead = self.lookahead, None
        else:
            self.byte = self.readbyte()

    def current(self) -> int:
        if self.byte is None:
            self.bump()
        return self.byte

    def ateol(self) -> bool:
        return self.current() == CR and self.peek() == LF

    def parse_field(self) -> bytes:
        """Reads one tab-delimited field.  The tab is consumed; a CRLF
        ends the field as well but is left for the caller."""
        out = bytearray()
        self.eol = False
        while True:
            byte = self.current()
            if byte == TAB:
                self.bump()
                break
            if byte == CR and self.peek() == LF:
                self.eol = True
                break
            out.append(byte)
            self.bump()
        return bytes(out)

    def decode(self, data: bytes, field: str) -> str:
        try:
            return data.decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidEncoding(field, data[e.start], client=self.client) from e

    def parse_port(self, data: bytes) -> int:
        text = self.decode(data, "port")
        digits = text.lstrip("0") or "0"
        if not portre.fullmatch(data) or len(digits) > 5 or int(digits) > 65535:
            raise InvalidPort(text, client=self.client)
        return int(digits)

    def parse_entry(self) -> DirectoryEntry:
        self.reading = "type"
        kind = classify(self.current())
        self.reading = "display"
        self.bump()
        display = self.decode(self.parse_field(), "display")
        self.reading = "selector"
        selector = self.parse_field()
        self.reading = "host"
        host = self.decode(self.parse_field(), "host")
        self.reading = "port"
        if self.eol:
            # Short line, the server left out the port.
            port = 0
        else:
            port = self.parse_port(self.parse_field())

        # Skip over any other remaining tab-delimited fields
        self.reading = "end of line"
        while not self.ateol():
            self.bump()
        self.bump()
        # The LF is consumed; the next record's first byte is read lazily.
        self.byte = None
        self.reading = "type"

        return DirectoryEntry(kind, display, selector, host, port)

    def skip_terminator(self) -> None:
        """Consume the rest of the "." line.  Servers may close the
        connection right after the period, so end of stream is fine."""
        while self.byte != LF:
            if self.lookahead is not None:
                self.bump()
                continue
            data = self.rfile.read(1)
            if not data:
                break
            self.byte = data[0]
        self.byte = None

    def parse_menu(self) -> typing.List[DirectoryEntry]:
        """Parses a whole menu, up to and including the "." line."""
        entries = []
        while self.current() != PERIOD:
            entries.append(self.parse_entry())
        self.skip_terminator()
        return entries

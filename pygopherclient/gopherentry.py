# pygopherclient -- Gopher protocol client in Python
# module: Gopher menu entry objects
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

import enum
import re
import typing
import urllib.parse
from dataclasses import dataclass


class EntityType(enum.Enum):
    """The item types defined by RFC 1436.  The value of each member is
    the type byte that introduces the menu line."""

    FILE = ord("0")
    DIRECTORY = ord("1")
    CSO_QUERY = ord("2")
    ERROR = ord("3")
    MAC_BINHEX = ord("4")
    DOS_BINARY = ord("5")
    UUENCODED = ord("6")
    SEARCH_QUERY = ord("7")
    TELNET = ord("8")
    BINARY = ord("9")
    REDUNDANT_SERVER = ord("+")
    TN3270 = ord("T")
    GIF = ord("g")
    HTML = ord("h")
    INFO = ord("i")
    IMAGE = ord("I")

    @property
    def code(self) -> str:
        return chr(self.value)

    @property
    def label(self) -> str:
        return labels[self]


labels = {
    EntityType.FILE: "file",
    EntityType.DIRECTORY: "dir",
    EntityType.CSO_QUERY: "cso",
    EntityType.ERROR: "err",
    EntityType.MAC_BINHEX: "binhex",
    EntityType.DOS_BINARY: "dosbin",
    EntityType.UUENCODED: "uuenc",
    EntityType.SEARCH_QUERY: "search",
    EntityType.TELNET: "tel",
    EntityType.BINARY: "bin",
    EntityType.REDUNDANT_SERVER: "server",
    EntityType.TN3270: "tn3270",
    EntityType.GIF: "gif",
    EntityType.HTML: "html",
    EntityType.INFO: "info",
    EntityType.IMAGE: "img",
}


@dataclass(frozen=True)
class UnknownType:
    """A type byte that is not in EntityType, kept verbatim."""

    value: int

    @property
    def code(self) -> str:
        return chr(self.value)

    @property
    def label(self) -> str:
        return "?"


EntityKind = typing.Union[EntityType, UnknownType]


def classify(byte: int) -> EntityKind:
    try:
        return EntityType(byte)
    except ValueError:
        return UnknownType(byte)


@dataclass(frozen=True)
class DirectoryEntry:
    """One line of a Gopher menu.

    The selector is kept as raw bytes; servers are free to put anything
    in it and the client only ever sends it back verbatim."""

    kind: EntityKind
    display: str
    selector: bytes  # Might be empty.
    host: str
    port: int

    def isinfo(self) -> bool:
        return self.kind is EntityType.INFO

    def geturl(self) -> str:
        """If this selector is a URL: one, then we just return the rest of
        it.  Otherwise, generate a gopher:// URL and quote it."""
        selector = self.selector.decode("latin-1")
        if re.search("^(/|)URL:.+://", selector):
            if selector[0] == "/":
                return selector[5:]
            else:
                return selector[4:]

        retval = "gopher://%s:%d/" % (self.host, self.port)
        retval += urllib.parse.quote(bytes([self.kind.value]) + self.selector)
        return retval

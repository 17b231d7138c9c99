import configparser
import os
import socketserver
import threading
import typing
from io import BytesIO, StringIO

from pygopherclient import initialization, logger

CONFIG_FILE = os.path.join(os.path.dirname(__file__), "..", "conf", "pygopherclient.conf")

# The example menu from RFC 1436, section 3.
MENU_DATA = (
    b"0About internet Gopher\tStuff:About us\trawBits.micro.umn.edu\t70\r\n"
    b"1Around University of Minnesota\tZ,5692,AUM\tunderdog.micro.umn.edu\t70\r\n"
    b"1Microcomputer News & Prices\tPrices/\tpserver.bookstore.umn.edu\t70\r\n"
    b"1Courses, Schedules, Calendars\t\tevents.ais.umn.edu\t9120\r\n"
    b"1Student-Staff Directories\t\tuinfo.ais.umn.edu\t70\r\n"
    b"1Departmental Publications\tStuff:DP:\trawBits.micro.umn.edu\t70\r\n"
    b".\r\n"
)


def get_config() -> configparser.ConfigParser:
    config = initialization.init_config(CONFIG_FILE)
    config.set("pygopherclient", "host", "localhost")
    return config


def get_string_logger() -> StringIO:
    config = get_config()
    config.set("logger", "logmethod", "file")
    logger.init(config)
    fp = StringIO()

    def log(message: str) -> None:
        fp.write(message + "\n")

    logger.log = log
    return fp


def get_menu_stream(data: bytes = MENU_DATA) -> BytesIO:
    return BytesIO(data)


class MenuRequestHandler(socketserver.StreamRequestHandler):
    """Answers every request with the server's canned response and
    remembers the request line."""

    server: "MenuServer"

    def handle(self) -> None:
        self.server.requests.append(self.rfile.readline())
        self.wfile.write(self.server.response)


class MenuServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True

    def __init__(self, response: bytes):
        self.response = response
        self.requests: typing.List[bytes] = []
        super().__init__(("localhost", 0), MenuRequestHandler)


def get_testing_server(
    response: bytes = MENU_DATA,
) -> typing.Tuple[MenuServer, threading.Thread]:
    """Spin up a server in a separate thread.  Call server.shutdown() and
    server.server_close() when done."""
    server = MenuServer(response)
    thread = threading.Thread(target=server.serve_forever)
    thread.start()
    return server, thread

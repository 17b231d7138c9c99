import functools
import os
import socket
import typing
from configparser import ConfigParser

from pygopherclient import GopherExceptions, logger
from pygopherclient.client import DEFAULT_PORT, GopherClient

defaults = {
    "pygopherclient": {
        "host": "localhost",
        "port": str(DEFAULT_PORT),
        "selector": "",
        "tracebacks": "no",
    },
    "logger": {
        "logmethod": "none",
        "priority": "LOG_INFO",
        "facility": "LOG_DAEMON",
    },
}


def init_config(filename: str) -> ConfigParser:
    if not (os.path.isfile(filename) and os.access(filename, os.R_OK)):
        raise Exception(
            f"Could NOT access config file {filename}\n"
            f"Please specify config file as a command-line argument\n"
        )

    config = default_config()
    config.read(filename)
    return config


def default_config() -> ConfigParser:
    config = ConfigParser()
    config.read_dict(defaults)
    return config


def init_logger(config: ConfigParser, filename: str) -> None:
    logger.init(config)
    logger.log(f"Pygopherclient starting, using configuration {filename}")


def init_exceptions(config: ConfigParser) -> None:
    GopherExceptions.init(config.getboolean("pygopherclient", "tracebacks"))


def get_client(
    config: ConfigParser,
    host: typing.Optional[str] = None,
    port: typing.Optional[int] = None,
) -> GopherClient:
    """Builds a client from the config.  host and port override the
    configured server."""
    host = host or config.get("pygopherclient", "host")
    if port is None:
        port = config.getint("pygopherclient", "port")

    connect = socket.create_connection
    if config.has_option("pygopherclient", "timeout"):
        timeout = config.getfloat("pygopherclient", "timeout")
        connect = functools.partial(socket.create_connection, timeout=timeout)

    return GopherClient(host, port, connect=connect)

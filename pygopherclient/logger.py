import sys
import typing

syslogfunc: typing.Callable[[int, str], None]
priority: int
facility: int


def log_file(message: str) -> None:
    sys.stdout.buffer.write((message + "\n").encode(errors="surrogateescape"))
    sys.stdout.buffer.flush()


def log_stderr(message: str) -> None:
    # Standard output carries the menu when run from the command line.
    sys.stderr.buffer.write((message + "\n").encode(errors="surrogateescape"))
    sys.stderr.buffer.flush()


def log_syslog(message: str) -> None:
    # Python's syslog forces UTF-8 and doesn't allow surrogate escapes.
    message_bytes = message.encode(errors="surrogateescape")
    message = message_bytes.decode("utf-8", errors="backslashreplace")
    syslogfunc(priority, message)


def log_none(message: str) -> None:
    pass


# Stay quiet until init() is called, the client is usually embedded.
log: typing.Callable[[str], None] = log_none


def init(config):
    global log, priority, facility, syslogfunc
    logmethod = config.get("logger", "logmethod")
    if logmethod == "syslog":
        import syslog

        priority = getattr(syslog, config.get("logger", "priority"))
        facility = getattr(syslog, config.get("logger", "facility"))
        syslog.openlog("pygopherclient", syslog.LOG_PID, facility)
        syslogfunc = syslog.syslog
        log = log_syslog
    elif logmethod == "file":
        log = log_file
    elif logmethod == "stderr":
        log = log_stderr
    else:
        log = log_none

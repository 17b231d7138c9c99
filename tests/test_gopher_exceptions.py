#!/usr/bin/python

import unittest

from pygopherclient import GopherExceptions, testutil
from pygopherclient.client import GopherClient
from pygopherclient.GopherExceptions import (
    GopherError,
    InvalidEncoding,
    InvalidPort,
    UnexpectedEndOfStream,
)


class GopherExceptionsTestCase(unittest.TestCase):
    def setUp(self):
        self.stringfile = testutil.get_string_logger()
        GopherExceptions.tracebacks = 0

    def testlog_basic(self):
        try:
            raise IOError("foo")
        except IOError as e:
            GopherExceptions.log(e)
        self.assertEqual(
            self.stringfile.getvalue(),
            "unknown-address [None] EXCEPTION OSError: foo\n",
        )

    def testlog_client(self):
        client = GopherClient("gopher.example.org", 7070)
        GopherExceptions.log(IOError("foo"), client)
        self.assertEqual(
            self.stringfile.getvalue(),
            "gopher.example.org:7070 [GopherClient] EXCEPTION OSError: foo\n",
        )

    def testInvalidPort(self):
        try:
            raise InvalidPort("abc")
        except InvalidPort as e:
            self.assertEqual(str(e), "'abc' is not a valid port number")
            self.assertEqual(e.port, "abc")
            self.assertIsInstance(e, ValueError)
        self.assertEqual(
            self.stringfile.getvalue(),
            "unknown-address [None] EXCEPTION InvalidPort: "
            "'abc' is not a valid port number\n",
        )

    def testInvalidEncoding(self):
        e = InvalidEncoding("display", 0xE9)
        self.assertEqual(str(e), "display field contains non-ASCII byte 0xe9")
        self.assertIsInstance(e, GopherError)

    def testUnexpectedEndOfStream(self):
        e = UnexpectedEndOfStream("port")
        self.assertEqual(
            str(e),
            "connection closed before the menu was complete (while reading port)",
        )
        self.assertIsInstance(e, EOFError)

    def testinit(self):
        GopherExceptions.init(True)
        self.assertTrue(GopherExceptions.tracebacks)
        GopherExceptions.init(False)
        self.assertFalse(GopherExceptions.tracebacks)

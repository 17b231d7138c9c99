import contextlib
import io
import unittest
from unittest import mock

from pygopherclient import cli, testutil
from pygopherclient.gopherentry import DirectoryEntry, EntityType, UnknownType


class RenderTestCase(unittest.TestCase):
    def test_render(self):
        entry = DirectoryEntry(EntityType.DIRECTORY, "Fun and Games", b"/fun", "h", 70)
        self.assertEqual(cli.render(entry), "[   dir] Fun and Games")
        entry = DirectoryEntry(UnknownType(ord("s")), "A song", b"/a.wav", "h", 70)
        self.assertEqual(cli.render(entry), "[     ?] A song")


class MainTestCase(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.server, cls.thread = testutil.get_testing_server()

    @classmethod
    def tearDownClass(cls):
        cls.server.shutdown()
        cls.server.server_close()
        cls.thread.join(timeout=5)

    def run_main(self, *argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            status = cli.main(list(argv))
        return status, stdout.getvalue(), stderr.getvalue()

    def test_main(self):
        host, port = self.server.server_address[:2]
        status, out, err = self.run_main(host, str(port), "Prices/")
        self.assertEqual(status, 0)
        self.assertEqual(err, "")
        lines = out.splitlines()
        self.assertEqual(len(lines), 6)
        self.assertEqual(lines[0], "[  file] About internet Gopher")
        self.assertEqual(lines[1], "[   dir] Around University of Minnesota")
        self.assertIn(b"Prices/\r\n", self.server.requests)

    def test_main_config(self):
        host, port = self.server.server_address[:2]
        status, out, err = self.run_main("-c", testutil.CONFIG_FILE, host, str(port))
        self.assertEqual(status, 0)
        self.assertEqual(len(out.splitlines()), 6)

    def test_main_error(self):
        with mock.patch(
            "pygopherclient.client.GopherClient.fetch_directory",
            side_effect=ConnectionRefusedError("connection refused"),
        ):
            status, out, err = self.run_main("localhost", "7")
        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertEqual(err, "error: connection refused\n")

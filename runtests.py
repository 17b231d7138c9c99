#!/usr/bin/env python3
import sys
import tracemalloc
import unittest

if __name__ == "__main__":
    tracemalloc.start()

    # An optional argument narrows the run, e.g. "test_parser*.py"
    pattern = sys.argv[1] if len(sys.argv) > 1 else "test*.py"
    suite = unittest.defaultTestLoader.discover(start_dir="tests/", pattern=pattern)
    runner = unittest.TextTestRunner(verbosity=2)
    sys.exit(not runner.run(suite).wasSuccessful())

import os
import unittest
from unittest.mock import patch

from datadonuts.misc import environ
from datadonuts.tests import named_file

CONFIG = """
[paths]
cache_dir = /srv/cache/%(name)s/%(version)s
"""


class TestEnviron(unittest.TestCase):
    def test_get_path_from_config(self):
        with named_file(CONFIG, suffix=".conf") as fn, \
                patch.object(environ, "_config_paths", return_value=[fn]):
            self.assertEqual(environ.get_path("no_such_path", "x"), "x")
            with patch.dict(os.environ, {environ.CACHE_DIR_ENV: ""}):
                self.assertEqual(
                    environ.cache_dir(),
                    "/srv/cache/datadonuts/" + environ.short_version)

    def test_defaults_without_config(self):
        with patch.object(environ, "_config_paths", return_value=[]), \
                patch.dict(os.environ, {environ.CACHE_DIR_ENV: ""}):
            self.assertIsNone(environ.get_path("cache_dir"))
            self.assertIn(os.path.join("datadonuts", environ.short_version),
                          environ.cache_dir())

    def test_env_overrides_cache_dir(self):
        with named_file(CONFIG, suffix=".conf") as fn, \
                patch.object(environ, "_config_paths", return_value=[fn]), \
                patch.dict(os.environ, {environ.CACHE_DIR_ENV: "/tmp/dd"}):
            self.assertEqual(environ.cache_dir(), "/tmp/dd")


if __name__ == "__main__":
    unittest.main()

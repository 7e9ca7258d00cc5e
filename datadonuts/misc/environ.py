"""
environ
=======

This module contains some basic configuration options for datadonuts
(for now only the directory where downloaded datasets are cached).

How it works
------------

The configuration is read from '{sys.prefix}/etc/datadonutsrc.conf'
which is a standard `configparser` file. The cache directory can also be
set with the `DATADONUTS_CACHE_DIR` environment variable, which takes
precedence over the file.

datadonutsrc.conf
-----------------

.. code-block:: cfg

    # An example datadonutsrc.conf file
    # ---------------------------------
    #
    # A number of variables are predefined:
    # - prefix: `sys.prefix`
    # - name: The library name ('datadonuts')
    # - version: The library version ('datadonuts.__version__')

    [paths]
    # The path where downloaded datasets are cached
    cache_dir = %(prefix)s/cache/%(name)s/%(version)s

"""
import configparser
import logging
import os
import sys
import sysconfig
from typing import List, Optional

from datadonuts.version import short_version

log = logging.getLogger(__name__)

CACHE_DIR_ENV = "DATADONUTS_CACHE_DIR"


def _config_paths() -> List[str]:
    return [os.path.join(sysconfig.get_path("data"), "etc/datadonutsrc.conf")]


def _get_parsed_config():
    vars = {
        "home": os.path.expanduser("~/"),
        "prefix": sys.prefix,
        "data": sysconfig.get_path("data"),
        "name": "datadonuts",
        "version": short_version,
    }
    conf = configparser.ConfigParser(vars)
    read = conf.read(_config_paths(), encoding="utf-8")
    if read:
        log.debug("Read configuration from %s", ", ".join(read))
    if not conf.has_section("paths"):
        conf.add_section("paths")
    return conf


def get_path(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get configured path

    Parameters
    ----------
    name: str
        The named config path value
    default: Optional[str]
        The default to return if `name` is not defined
    """
    cfg = _get_parsed_config()
    try:
        return cfg.get('paths', name)
    except (configparser.NoOptionError, configparser.NoSectionError):
        return default


def _default_cache_dir():
    if sys.platform == "darwin":
        base = os.path.expanduser("~/Library/Caches")
    elif sys.platform == "win32":
        base = os.getenv("APPDATA", os.path.expanduser("~/AppData/Local"))
    elif os.name == "posix":
        base = os.getenv("XDG_CACHE_HOME", os.path.expanduser("~/.cache"))
    else:
        base = os.path.expanduser("~/.cache")

    base = os.path.join(base, "datadonuts", short_version)
    if sys.platform == "win32":
        # APPDATA is shared with other application data;
        # downloads go to a Cache subdirectory
        return os.path.join(base, "Cache")
    else:
        return base


def cache_dir():
    """
    Return the platform dependent datadonuts cache directory.
    """
    env = os.getenv(CACHE_DIR_ENV)
    if env:
        return env
    return get_path("cache_dir", _default_cache_dir())

import logging
from importlib.metadata import PackageNotFoundError, version as pkg_version

try:
    __version__ = pkg_version("geoblacklight-helpers")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

logger = logging.getLogger("geoblacklight")

__all__ = ["__version__", "logger"]

"""Lirix weather front end"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("lirix")
except PackageNotFoundError:
    __version__ = "dev"

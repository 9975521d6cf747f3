"""formrules: conditional form-logic engine for lead-generation campaigns."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("formrules")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

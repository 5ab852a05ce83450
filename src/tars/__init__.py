"""Tars: a line-oriented task tracker."""

from tars.config import VERSION

__version__ = VERSION

# src/nodecounter/cli/__init__.py
"""
Node counter CLI package.

Exposes the top-level Typer `app` used by the console entrypoint and tests.
"""

from ..core.processor import ReportProcessor
from ..reporters.console_reporter import ConsoleReporter
from .main import app

__all__ = ["app", "ConsoleReporter", "ReportProcessor"]

"""Reporter modules for run diagnostics and outputs."""

from .base import Reporter
from .console import ConsoleReporter
from .github_actions import GitHubActionsReporter

__all__ = ["Reporter", "ConsoleReporter", "GitHubActionsReporter"]

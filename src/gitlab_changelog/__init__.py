"""Draft changelog generation from git history and GitLab merge requests."""

__version__ = "0.1.0"

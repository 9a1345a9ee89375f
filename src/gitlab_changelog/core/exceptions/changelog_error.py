class ChangelogError(Exception):
    """Base class for every error raised while generating a changelog."""

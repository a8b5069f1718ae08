"""Let users opt into an email for every comment posted on the site."""

__version__ = "1.0"


def version() -> str:
    """Return the package version."""

    return __version__

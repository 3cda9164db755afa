"""Package version, read from the installed distribution's metadata."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "styled-breakpoints"


def get_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        # Running from a source checkout without installing
        return "0.0.0"


__version__ = get_version()

from importlib import metadata

DISTRIBUTION_NAME = "wunderlist-client"
UNKNOWN_VERSION = "0.0.0"


def get_version() -> str:
    """Version of the installed distribution, ``0.0.0`` when running from an uninstalled checkout."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return UNKNOWN_VERSION

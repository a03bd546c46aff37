from importlib.metadata import PackageNotFoundError, version


def _detect_version() -> str:
    """
    Detect termcharts version.

    Falls back to a development placeholder if the package metadata
    is not available.
    """
    try:
        return version("termcharts")
    except PackageNotFoundError:
        return "0.0.0-dev"

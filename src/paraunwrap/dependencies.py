#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Availability probes for optional dependencies.

The unwrap transform and the JSON codec only need the standard library.
Optional packages (currently just ``rich`` for colored CLI diagnostics) are
probed explicitly so callers can decide whether a missing package is fatal
or simply means falling back to plain output.
"""

from __future__ import annotations

import importlib.util
import logging

from paraunwrap.exceptions import DependencyError

logger = logging.getLogger(__name__)


def check_package_installed(import_name: str) -> bool:
    """Check if a package is installed and importable.

    Parameters
    ----------
    import_name : str
        Name to use in import statement (e.g., 'rich')

    Returns
    -------
    bool
        True if package can be found by the import system

    """
    try:
        return importlib.util.find_spec(import_name) is not None
    except (ImportError, ValueError):
        return False


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    return check_package_installed("rich")


def require_package(import_name: str, install_name: str | None = None, feature_name: str | None = None) -> None:
    """Raise ``DependencyError`` unless a package is available.

    Parameters
    ----------
    import_name : str
        Module name to probe
    install_name : str, optional
        Distribution name on the package index, defaults to ``import_name``
    feature_name : str, optional
        Feature that needs the package, used in the error message

    Raises
    ------
    DependencyError
        If the package is not installed

    """
    if check_package_installed(import_name):
        return

    install_name = install_name or import_name
    logger.debug("Optional dependency %s is not installed", install_name)
    raise DependencyError(
        feature_name=feature_name or import_name,
        missing_packages=[(install_name, "")],
        install_command=f"pip install paraunwrap[{install_name}]",
    )

"""Base plugin discovery utilities."""

import importlib
import pkgutil
from typing import List

import pluggy
import structlog

logger = structlog.get_logger()


def auto_discover_plugins(
    pm: pluggy.PluginManager,
    base_packages: List[str],
) -> None:
    """Auto-discover and register plugins from base packages.

    Scans the given packages (e.g. "modules") for sub-packages and imports
    them. Each imported package is registered with the plugin manager, so
    any function in its namespace decorated with @hookimpl becomes a hook
    implementation.

    A package that fails to import is logged and skipped.

    Args:
        pm: Plugin manager to register plugins with.
        base_packages: Importable package names to scan.

    Example:
        >>> pm = pluggy.PluginManager("content_localization")
        >>> pm.add_hookspecs(hookspecs.localization)
        >>> auto_discover_plugins(pm, base_packages=["modules"])
    """
    for base_package in base_packages:
        try:
            package = importlib.import_module(base_package)
        except ImportError as e:
            logger.warning("base_package_not_found", package=base_package, error=str(e))
            continue

        search_path = getattr(package, "__path__", None)
        if search_path is None:
            logger.warning("base_package_not_a_package", package=base_package)
            continue

        logger.debug("scanning_base_package", package=base_package)

        for pkg_info in pkgutil.iter_modules(search_path):
            if not pkg_info.ispkg:
                continue
            module_name = f"{base_package}.{pkg_info.name}"
            try:
                module = importlib.import_module(module_name)
                if not pm.is_registered(module):
                    pm.register(module)
                logger.debug("plugin_registered", module=module_name)
            except Exception as e:
                logger.error(
                    "plugin_registration_failed",
                    module=module_name,
                    error=str(e),
                    exc_info=True,
                )

"""Auto-discovery of Temporal workflows and activities.

Scans the workflows and activities packages for decorated classes/functions,
so adding a workflow means dropping a module in `cafeflow/temporal/workflows/`
and nothing else.
"""

import importlib
import inspect
import logging
import pkgutil
import sys
from collections.abc import Iterator
from types import ModuleType
from typing import Any

logger = logging.getLogger(__name__)

WORKFLOWS_PACKAGE = 'cafeflow.temporal.workflows'
ACTIVITIES_PACKAGE = 'cafeflow.temporal.activities'

# Modules holding shared utilities rather than workflow definitions
SKIPPED_MODULES = {'base'}


def _iter_modules(package_name: str, recursive: bool, failed: list[str]) -> Iterator[ModuleType]:
    """Import and yield every public module of a package.

    Import errors are logged AND printed to stderr, and the module name is
    appended to `failed`; discovery carries on with the remaining modules.
    """
    try:
        package = importlib.import_module(package_name)
    except ImportError:
        msg = f'Failed to import package {package_name}'
        logger.exception(msg)
        print(f'ERROR: {msg}', file=sys.stderr)
        failed.append(package_name)
        return

    for _, module_name, is_pkg in pkgutil.iter_modules(package.__path__):
        if module_name.startswith('_') or module_name in SKIPPED_MODULES:
            continue

        full_module_name = f'{package_name}.{module_name}'

        if is_pkg:
            if recursive:
                yield from _iter_modules(full_module_name, recursive, failed)
            continue

        try:
            yield importlib.import_module(full_module_name)
        except Exception:
            failed.append(full_module_name)
            msg = f'Failed to import module {full_module_name}'
            logger.exception(msg)
            print(f'ERROR: {msg}', file=sys.stderr)


def discover_workflows(package_name: str = WORKFLOWS_PACKAGE) -> list[type]:
    """Discover all @workflow.defn decorated classes in a package.

    Recursively scans subpackages. Classes with a `__temporal_workflow_definition`
    attribute are discovered; a class re-exported by several modules is listed once.
    """
    workflows: list[type] = []
    failed: list[str] = []

    for module in _iter_modules(package_name, recursive=True, failed=failed):
        for _name, obj in inspect.getmembers(module, inspect.isclass):
            if hasattr(obj, '__temporal_workflow_definition') and obj not in workflows:
                workflows.append(obj)
                logger.debug(f'Discovered workflow: {obj.__name__}')

    if failed:
        print(f'WARNING: Failed to import {len(failed)} workflow modules: {failed}', file=sys.stderr)

    return workflows


def discover_activities(package_name: str = ACTIVITIES_PACKAGE) -> list[Any]:
    """Discover all @activity.defn decorated functions in a package.

    Activities are flat: subpackages are not scanned. A function is listed once
    even when several modules import it.
    """
    activities: list[Any] = []
    failed: list[str] = []
    modules_found = 0

    for module in _iter_modules(package_name, recursive=False, failed=failed):
        modules_found += 1
        for name, obj in inspect.getmembers(module, inspect.isfunction):
            if hasattr(obj, '__temporal_activity_definition') and obj not in activities:
                activities.append(obj)
                logger.debug(f'Discovered activity: {name} from {module.__name__}')

    if failed:
        print(f'WARNING: Failed to import {len(failed)} activity modules: {failed}', file=sys.stderr)

    logger.info(f'Activity discovery: {modules_found} modules loaded, {len(activities)} activities found')

    return activities

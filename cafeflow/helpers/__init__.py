"""Helpers: thin wrappers around one external service each.

Every external call goes through protected execution, so failures surface as
`HelperError(service_name, operation)`.
"""

from cafeflow.helpers.registry import HelperRegistry, build_helpers, get_helpers

__all__ = ['HelperRegistry', 'build_helpers', 'get_helpers']

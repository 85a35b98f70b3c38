from cafeflow.core.base.executor import arun_value, arun_void, run_value, run_void
from cafeflow.core.base.helper import BaseHelper

__all__ = [
    'BaseHelper',
    'arun_value',
    'arun_void',
    'run_value',
    'run_void',
]

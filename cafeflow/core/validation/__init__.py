from cafeflow.core.validation.schemas import (
    ComponentSpec,
    ComponentState,
    ComponentStatus,
    SettingRequirement,
)
from cafeflow.core.validation.settings import lookup_setting
from cafeflow.core.validation.specs import HELPER_SPECS
from cafeflow.core.validation.validator import render, report_configuration, validate

__all__ = [
    'HELPER_SPECS',
    'ComponentSpec',
    'ComponentState',
    'ComponentStatus',
    'SettingRequirement',
    'lookup_setting',
    'render',
    'report_configuration',
    'validate',
]

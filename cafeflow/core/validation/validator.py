"""Startup configuration report.

Checks which helpers are present and whether the settings they need are set,
then logs a boxed status table such as:

    ╔══════════════════════════════════════════════════════════════════╗
    ║                    CafeFlow Configuration Report                 ║
    ╠══════════════════════════════════════════════════════════════════╣
    ║ ✅ reddit                       — ready                          ║
    ║ ⚠️ email                        — MISSING: SMTP_PASSWORD         ║
    ║ ⬚  google_drive                 — not active                     ║
    ╚══════════════════════════════════════════════════════════════════╝

Missing configuration is reported, never raised: helpers that no workflow
uses must not block startup.
"""

import logging
from collections.abc import Callable, Iterable, Sequence

from cafeflow.core.validation.schemas import (
    ComponentSpec,
    ComponentState,
    ComponentStatus,
    SettingRequirement,
)
from cafeflow.core.validation.settings import lookup_setting
from cafeflow.core.validation.specs import HELPER_SPECS

logger = logging.getLogger(__name__)

PresenceCheck = Callable[[str], bool]
SettingLookup = Callable[[str], str | None]

REPORT_TITLE = 'CafeFlow Configuration Report'
MIN_INNER_WIDTH = 66
NAME_WIDTH = 28
STATUS_WIDTH = 30

# Every glyph occupies two terminal columns: the emoji are wide, the box is padded with a space.
# Rows therefore align on screen even though the strings differ in length.
GLYPHS = {
    ComponentState.READY: '✅',
    ComponentState.MISSING_CONFIG: '⚠️',
    ComponentState.INACTIVE: '⬚ ',
}

HINT = (
    '  💡 Tip: Copy .env.example to .env and configure the missing variables.\n'
    '          Only configure what your workflow needs.'
)


def _is_set(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def _is_satisfied(requirement: SettingRequirement, setting_lookup: SettingLookup) -> bool:
    if not requirement.lookup_keys:
        return True
    return any(_is_set(setting_lookup(key)) for key in requirement.lookup_keys)


def validate(
    registry: Iterable[ComponentSpec],
    presence_check: PresenceCheck,
    setting_lookup: SettingLookup,
) -> list[ComponentStatus]:
    """Compute the status of every component in the registry.

    Args:
        registry: Component specs, in the order they should be reported
        presence_check: Whether a component with the given name is active
        setting_lookup: Resolves a setting key to its value (None if unset)

    Returns:
        One ComponentStatus per spec, in registry order
    """
    statuses: list[ComponentStatus] = []

    for spec in registry:
        if not presence_check(spec.name):
            statuses.append(
                ComponentStatus(name=spec.name, state=ComponentState.INACTIVE, description=spec.description)
            )
            continue

        missing = tuple(
            requirement.display
            for requirement in spec.required_settings
            if not _is_satisfied(requirement, setting_lookup)
        )
        state = ComponentState.MISSING_CONFIG if missing else ComponentState.READY
        statuses.append(
            ComponentStatus(name=spec.name, state=state, missing_keys=missing, description=spec.description)
        )

    return statuses


def _status_text(status: ComponentStatus) -> str:
    if status.state == ComponentState.READY:
        return 'ready'
    if status.state == ComponentState.MISSING_CONFIG:
        return 'MISSING: ' + ', '.join(status.missing_keys)
    return 'not active'


def render(statuses: Sequence[ComponentStatus]) -> str:
    """Render statuses as a boxed, fixed-width table."""
    rows = [(GLYPHS[s.state], s.name, _status_text(s)) for s in statuses]

    name_width = max([NAME_WIDTH, *(len(name) for _, name, _ in rows)])
    status_width = max([STATUS_WIDTH, *(len(text) for _, _, text in rows)])
    # '║ ' + glyph(2) + ' ' + name + ' — ' + status + ' ║'
    inner_width = max(MIN_INNER_WIDTH, name_width + status_width + 8)
    status_width = inner_width - name_width - 8

    lines = [
        '╔' + '═' * inner_width + '╗',
        '║' + REPORT_TITLE.center(inner_width) + '║',
        '╠' + '═' * inner_width + '╣',
    ]
    for glyph, name, text in rows:
        lines.append(f'║ {glyph} {name:<{name_width}} — {text:<{status_width}} ║')
    lines.append('╚' + '═' * inner_width + '╝')

    report = '\n'.join(lines)
    if any(s.state == ComponentState.MISSING_CONFIG for s in statuses):
        report += '\n' + HINT
    return report


def report_configuration(
    presence_check: PresenceCheck,
    registry: Iterable[ComponentSpec] = HELPER_SPECS,
    setting_lookup: SettingLookup = lookup_setting,
) -> list[ComponentStatus]:
    """Validate the registry, log the rendered report and return the statuses.

    Never raises for missing configuration; the caller decides whether to
    keep running with reduced capability.
    """
    statuses = validate(registry, presence_check, setting_lookup)
    logger.info('\n%s', render(statuses))

    missing = [s.name for s in statuses if s.state == ComponentState.MISSING_CONFIG]
    if missing:
        logger.warning(f'Helpers with missing configuration: {missing}')

    return statuses

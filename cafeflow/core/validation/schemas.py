from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

OR_SEPARATOR = '|'


class SettingRequirement(BaseModel):
    """One configuration need, satisfied by ANY of its lookup keys.

    An empty `lookup_keys` means nothing is needed and is always satisfied.
    """

    model_config = ConfigDict(frozen=True)

    lookup_keys: tuple[str, ...] = Field(default=(), description='Alternative setting keys (OR-combined)')

    @classmethod
    def parse(cls, value: str) -> 'SettingRequirement':
        """Build a requirement from its display form, e.g. `GEMINI_API_KEY|GROQ_API_KEY`."""
        keys = tuple(key.strip() for key in value.split(OR_SEPARATOR) if key.strip())
        return cls(lookup_keys=keys)

    @property
    def display(self) -> str:
        return OR_SEPARATOR.join(self.lookup_keys)


class ComponentSpec(BaseModel):
    """Static description of a helper and the settings it needs."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description='Component name (the helper service name)')
    required_settings: tuple[SettingRequirement, ...] = Field(default=(), description='Requirements, in order')
    description: str = Field('', description='Human-readable description')


class ComponentState(str, Enum):
    """Readiness of a component."""

    READY = 'ready'
    MISSING_CONFIG = 'missing_config'
    INACTIVE = 'inactive'


class ComponentStatus(BaseModel):
    """Result of validating one component."""

    model_config = ConfigDict(frozen=True)

    name: str
    state: ComponentState
    missing_keys: tuple[str, ...] = Field(default=(), description='Display form of each unsatisfied requirement')
    description: str = ''

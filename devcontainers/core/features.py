"""Selection of the optional field groups compiled into a schema."""

import os
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

from .constants import (
    ALLOW_UNKNOWN_FIELDS,
    COMPOSE_INTEGRATION,
    FEATURE_NAMES,
    FEATURES_ENV_VAR,
    IDE_CUSTOMIZATIONS,
)
from .exceptions import FeatureConfigurationError


@dataclass(frozen=True)
class Features:
    """Optional field groups of a schema.

    A disabled group has no fields at all in the entities built from it, so
    documents using those keys are treated as having unknown fields.
    """

    allow_unknown_fields: bool = False
    ide_customizations: bool = False
    compose_integration: bool = False

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "Features":
        """Create from option names such as ``allow-unknown-fields``."""
        selected = set()
        for name in names:
            name = name.strip()
            if not name:
                continue
            if name not in FEATURE_NAMES:
                raise FeatureConfigurationError(
                    f"Unknown feature '{name}'. Expected one of: {', '.join(FEATURE_NAMES)}"
                )
            selected.add(name)
        return cls(
            allow_unknown_fields=ALLOW_UNKNOWN_FIELDS in selected,
            ide_customizations=IDE_CUSTOMIZATIONS in selected,
            compose_integration=COMPOSE_INTEGRATION in selected,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Features":
        """Create from the comma-separated DEVCONTAINERS_FEATURES variable."""
        if environ is None:
            environ = os.environ
        return cls.from_names(environ.get(FEATURES_ENV_VAR, "").split(","))

    def names(self) -> List[str]:
        """Get the option names of the enabled groups."""
        enabled = {
            ALLOW_UNKNOWN_FIELDS: self.allow_unknown_fields,
            IDE_CUSTOMIZATIONS: self.ide_customizations,
            COMPOSE_INTEGRATION: self.compose_integration,
        }
        return [name for name in FEATURE_NAMES if enabled[name]]

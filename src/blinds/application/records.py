"""Named frame records exchanged with external storage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from blinds.application.config import (
    config_to_parameters,
    load_config_from_dict,
    parameters_to_config,
)
from blinds.application.config.schema import MAX_NAME_LENGTH
from blinds.domain import FrameParameters


@dataclass(frozen=True)
class FrameRecord:
    """A stored frame: a display name plus its parameters.

    This is all that gets persisted. Layouts, piece lists and cutting plans
    are recomputed from the parameters whenever they are needed.
    """

    name: str
    parameters: FrameParameters

    def __post_init__(self) -> None:
        name = self.name.strip()
        if not name:
            raise ValueError("Frame name is required")
        if len(name) > MAX_NAME_LENGTH:
            raise ValueError(
                f"Frame name must be at most {MAX_NAME_LENGTH} characters"
            )
        object.__setattr__(self, "name", name)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible configuration dictionary."""
        config = parameters_to_config(self.parameters, self.name)
        return config.model_dump(mode="json", exclude={"overrides", "cut_list"})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FrameRecord":
        """Load a record from a configuration dictionary.

        Raises:
            ConfigError: If the data fails validation.
        """
        config = load_config_from_dict(data)
        return cls(name=config.name, parameters=config_to_parameters(config))

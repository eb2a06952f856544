"""Configuration for the grayscale converter."""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import ValidationError

DEFAULT_QUALITY = 90
MIN_QUALITY = 1
MAX_QUALITY = 100


@dataclass(frozen=True)
class ConverterConfig:
    """Resolved options for one converter run."""

    input_path: str = ""
    output_path: str = ""
    quality: int = DEFAULT_QUALITY
    info: bool = False

    @classmethod
    def from_yaml(cls, path: Path) -> "ConverterConfig":
        """Load a preset from a YAML file.

        Recognized keys are ``input``, ``output``, ``quality`` and ``info``.
        Missing keys keep their defaults. The result is not validated, since
        command-line flags may still fill in the paths.
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except OSError as exc:
            raise ValidationError(f"Cannot read config file {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ValidationError(f"Invalid YAML in config file {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValidationError(f"Config file {path} must contain a mapping")

        keys = {"input": "input_path", "output": "output_path", "quality": "quality", "info": "info"}
        unknown = sorted(set(data) - set(keys))
        if unknown:
            raise ValidationError(f"Unknown keys in config file {path}: {', '.join(unknown)}")

        values = {keys[k]: v for k, v in data.items()}
        for name in ("input_path", "output_path"):
            if values.get(name) is not None:
                values[name] = str(values[name])
        return cls().with_overrides(**values)

    def with_overrides(self, **values: Any) -> "ConverterConfig":
        """Return a copy with the given non-None fields replaced."""
        names = {f.name for f in fields(self)}
        changes = {k: v for k, v in values.items() if v is not None}
        unknown = sorted(set(changes) - names)
        if unknown:
            raise ValidationError(f"Unknown options: {', '.join(unknown)}")
        return replace(self, **changes)

    def validate(self) -> "ConverterConfig":
        """Check the options and return self.

        Raises:
            ValidationError: If a path is empty or quality is out of range.
        """
        if not self.input_path or not self.output_path:
            raise ValidationError("Both -input and -output are required")

        # bool is an int subclass; reject it explicitly
        if not isinstance(self.quality, int) or isinstance(self.quality, bool):
            raise ValidationError(f"Quality must be an integer, got {self.quality!r}")
        if self.quality < MIN_QUALITY or self.quality > MAX_QUALITY:
            raise ValidationError(
                f"Quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {self.quality}"
            )

        if not isinstance(self.info, bool):
            raise ValidationError(f"Info flag must be true or false, got {self.info!r}")

        return self

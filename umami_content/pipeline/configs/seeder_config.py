#!/usr/bin/env python3
"""
seeder_config.py
----------------

Runtime configuration of the content seeder.

Every option has a default, so the seeder runs without a config file.
A YAML file can override any of them:

    content_dir: ./my_content        # relative to the YAML file
    files_dir: /var/www/files
    ledger_key: umami_content_uuids
    default_state: published
    body_format: basic_html
    email_domain: example.com
    on_row_error: skip               # or 'abort' (default)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

# --- Third party imports ---
import yaml

# --- Local imports ---
from umami_content.core.exceptions import ValidationError
from umami_content.core.paths import DEFAULT_CONTENT_DIR
from umami_content.core.validators import DataValidator
from umami_content.database.ledger import DEFAULT_LEDGER_KEY


class RowErrorPolicy(str, Enum):
    """
    What to do with a CSV row that cannot be imported.
    - ABORT: Raise and halt the import
    - SKIP: Log, count and continue with the next row
    """

    ABORT = "abort"
    SKIP = "skip"

    @classmethod
    def choices(cls) -> List[str]:
        return [policy.value for policy in cls]


@dataclass
class SeederConfig:
    """
    Seeder settings.

    Attributes:
        content_dir: Directory holding the CSV files, bodies and images
        files_dir: Managed files directory (None keeps the database default)
        ledger_key: State key of the provenance ledger
        default_state: Workflow state of rows without a 'state' value
        body_format: Text format of imported bodies
        email_domain: Domain of derived user e-mail addresses
        on_row_error: RowErrorPolicy for malformed rows
    """

    content_dir: Path = field(default_factory=lambda: DEFAULT_CONTENT_DIR)
    files_dir: Optional[Path] = None
    ledger_key: str = DEFAULT_LEDGER_KEY
    default_state: str = "published"
    body_format: str = "basic_html"
    email_domain: str = "example.com"
    on_row_error: RowErrorPolicy = RowErrorPolicy.ABORT

    def __post_init__(self) -> None:
        self.content_dir = Path(self.content_dir)
        if self.files_dir is not None:
            self.files_dir = Path(self.files_dir)
        self.on_row_error = RowErrorPolicy(
            DataValidator.validate_choice(
                getattr(self.on_row_error, "value", self.on_row_error),
                RowErrorPolicy.choices(),
                "on_row_error",
            )
        )
        for name in ("ledger_key", "default_state", "body_format", "email_domain"):
            value = DataValidator.normalize_string(getattr(self, name))
            if not value:
                raise ValidationError(f"Config value '{name}' cannot be empty")
            setattr(self, name, value)

    @property
    def skip_bad_rows(self) -> bool:
        return self.on_row_error is RowErrorPolicy.SKIP

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], base_dir: Optional[Path] = None
    ) -> "SeederConfig":
        """
        Build a config from a mapping.

        Args:
            data: Option values keyed by option name
            base_dir: Directory that relative paths are resolved against

        Returns:
            SeederConfig

        Raises:
            ValidationError: If keys are unknown or values invalid
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(f"Unknown config keys: {unknown}")

        values = dict(data)
        for key in ("content_dir", "files_dir"):
            if values.get(key) is not None:
                path = Path(str(values[key])).expanduser()
                if base_dir is not None and not path.is_absolute():
                    path = base_dir / path
                values[key] = path
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "SeederConfig":
        """
        Load a config from a YAML file.

        Args:
            path: YAML file path

        Returns:
            SeederConfig

        Raises:
            ValidationError: If the file is not valid YAML, not a mapping,
                or holds unknown keys or invalid values
        """
        path = Path(path)
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValidationError(f"Invalid YAML in {path}: {e}") from e
        except OSError as e:
            raise ValidationError(f"Cannot read config file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValidationError(f"Config file {path} must contain a mapping")
        return cls.from_dict(data, base_dir=path.parent)

    def with_overrides(self, **overrides: Any) -> "SeederConfig":
        """Return a copy with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

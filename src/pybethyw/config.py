"""Runtime configuration for pybethyw."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any


def _env_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    return int(value)


@dataclasses.dataclass(frozen=True)
class BethYwConfig:
    """Import/export configuration.

    Parameters
    ----------
    data_dir : Path
        Directory holding the dataset files listed in
        :mod:`pybethyw.datasets`.
    encoding : str
        Text encoding used to open dataset files.
    json_indent : int or None
        Indentation for JSON output; ``None`` prints compact JSON.
    """

    data_dir: Path = Path("datasets")
    encoding: str = "utf-8"
    json_indent: int | None = None

    @classmethod
    def from_env(cls, **overrides: Any) -> BethYwConfig:
        """Create configuration from ``BETHYW_*`` environment variables.

        Reads ``BETHYW_DATA_DIR``, ``BETHYW_ENCODING`` and
        ``BETHYW_JSON_INDENT``.  Explicit keyword arguments that are not
        ``None`` override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        data_dir = env.get("BETHYW_DATA_DIR")
        if data_dir:
            config_kwargs["data_dir"] = Path(data_dir)

        encoding = env.get("BETHYW_ENCODING")
        if encoding:
            config_kwargs["encoding"] = encoding

        indent = _env_int(env.get("BETHYW_JSON_INDENT"))
        if indent is not None:
            config_kwargs["json_indent"] = indent

        config_kwargs.update({key: value for key, value in overrides.items() if value is not None})
        if "data_dir" in config_kwargs:
            config_kwargs["data_dir"] = Path(config_kwargs["data_dir"])

        return cls(**config_kwargs)

from __future__ import annotations

import json
import logging
import os
from typing import Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigIOError, ConfigParseError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.json"

DEVELOPMENT_ENVS = ("development", "dev")


class Config(BaseModel):
    """Settings decoded from the JSON configuration file.

    ``port`` is the bind address (``host:port``, ``:port`` or a bare port)
    and ``env`` the environment label. Unknown keys are ignored and missing
    ones, or ones set to null, stay empty.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    port: str = ""
    env: str = ""

    @field_validator("port", "env", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        # JSON null leaves the field at its zero value.
        return "" if value is None else value

    @property
    def is_development(self) -> bool:
        return self.env.strip().lower() in DEVELOPMENT_ENVS


def load_config(path: Union[str, "os.PathLike[str]"] = DEFAULT_CONFIG_PATH) -> Config:
    """Read and decode the configuration file at ``path``.

    Raises ConfigIOError when the file cannot be read and ConfigParseError
    when its contents are not a JSON object with string ``port``/``env``.
    """
    path = os.fspath(path)
    try:
        with open(path, "rb") as fh:
            raw = fh.read()
    except OSError as e:
        raise ConfigIOError(f"cannot read config file {path}: {e.strerror or e}", path) from e

    try:
        data = json.loads(raw)
    except ValueError as e:
        raise ConfigParseError(f"invalid JSON in config file {path}: {e}", path) from e
    if not isinstance(data, dict):
        raise ConfigParseError(
            f"config file {path} must contain a JSON object, got {type(data).__name__}", path
        )

    try:
        config = Config.model_validate(data, strict=True)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ConfigParseError(f"config file {path} has invalid fields: {fields}", path) from e

    logger.debug("Loaded config from %s (env=%r)", path, config.env)
    return config

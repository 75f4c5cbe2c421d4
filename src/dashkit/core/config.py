import logging
import os
from pydantic import BaseModel, ValidationError, field_validator

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ENV_VARS = {
    "LOG_LEVEL": "DASHKIT_LOG_LEVEL",
    "LOG_FORMAT": "DASHKIT_LOG_FORMAT",
}

_log = logging.getLogger(__name__)


class Settings(BaseModel):
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_level(cls, value: str) -> str:
        value = value.upper()
        if value not in _LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(_LEVELS)}. Got '{value}'."
            )
        return value

    @field_validator("LOG_FORMAT")
    @classmethod
    def _check_format(cls, value: str) -> str:
        # logging.Formatter rejects %-style strings with no fields
        logging.Formatter(fmt=value)
        return value

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from ``DASHKIT_*`` environment variables.

        Never raises: an invalid value is reported and replaced by the
        default, so importing the package cannot fail on a bad environment.
        """
        values = {}
        for field, env_var in _ENV_VARS.items():
            value = os.getenv(env_var)
            if value:
                values[field] = value

        try:
            return cls(**values)
        except ValidationError as e:
            for error in e.errors():
                field = error["loc"][0]
                _log.warning(
                    "Ignoring %s=%r: %s",
                    _ENV_VARS[field],
                    values.pop(field, None),
                    error["msg"],
                )
            return cls(**values)


settings = Settings.load()

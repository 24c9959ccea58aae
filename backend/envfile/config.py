# Loader settings read from the process environment.
import codecs
import os

from pydantic import BaseModel, Field, field_validator

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}

ENV_VARS = {
    "filename": "ENVFILE_PATH",
    "encoding": "ENVFILE_ENCODING",
    "overwrite": "ENVFILE_OVERWRITE",
}


class LoaderSettings(BaseModel):
    filename: str = Field(".env", min_length=1)
    encoding: str = Field("utf-8", min_length=1)
    overwrite: bool = True

    @field_validator("encoding")
    @classmethod
    def check_codec(cls, value):
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value!r}")
        return value

    @field_validator("overwrite", mode="before")
    @classmethod
    def parse_flag(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in TRUE_VALUES:
                return True
            if lowered in FALSE_VALUES:
                return False
            raise ValueError(f"invalid boolean flag: {value!r}")
        return value


# Build settings from ENVFILE_* variables, falling back to the defaults.
# With field names given, only those variables are read; the rest keep
# their defaults so an unrelated bad value does not get in the way.
def get_settings(*fields: str) -> LoaderSettings:
    values = {}
    for field in fields or ENV_VARS:
        raw = os.getenv(ENV_VARS[field])
        if raw is not None:
            values[field] = raw
    return LoaderSettings(**values)

from typing import Literal

from pydantic import BaseModel


class EnvConfig(BaseModel):
    """
    One environment setting read by a client, relative to the client's key prefix.

    Attributes:
        env_key (str): Key without prefix, e.g. "BASE_URL" for ARCHIVE_SUPABASE_BASE_URL.
        val_type (str): How the raw value is parsed: "string", "number", "bool" or "list".
        default (str | int | float | bool | list | None): Value used when the variable is unset. None marks the setting as mandatory.
    """

    env_key: str
    val_type: Literal["string", "number", "bool", "list"] = "string"
    default: str | int | float | bool | list | None = None

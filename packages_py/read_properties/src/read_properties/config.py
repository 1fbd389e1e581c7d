"""
Action input resolution.

Inputs are resolved from multiple sources in priority order:
1. Direct argument (if not None)
2. ``INPUT_<NAME>`` environment variables set by the runner
3. Default value
"""
import os
from typing import Any, List, Optional, Union

from pydantic import ValidationError

from .errors import InvalidInputError
from .types import ResolutionRequest

TRUE_VALUES = ("true", "1", "yes", "on")


def input_env_key(name: str) -> str:
    """Environment variable the runner uses for an action input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def resolve(arg: Any, env_keys: Union[str, List[str]], default: Any) -> Any:
    if arg is not None:
        return arg

    if isinstance(env_keys, str):
        env_keys = [env_keys]

    for key in env_keys:
        if key:
            val = os.getenv(key)
            if val is not None:
                return val.strip()

    return default


def resolve_bool(arg: Any, env_keys: Union[str, List[str]], default: bool) -> bool:
    """Resolve boolean value with string conversion support."""
    val = resolve(arg, env_keys, default)

    if isinstance(val, bool):
        return val
    if isinstance(val, str):
        return val.lower() in TRUE_VALUES

    return bool(val)


def get_input(name: str, arg: Optional[str] = None, required: bool = False) -> Optional[str]:
    """Read one action input; empty strings count as not supplied."""
    val = resolve(arg, input_env_key(name), None)
    if not val:
        if required:
            raise InvalidInputError(f"Input required and not supplied: {name}")
        return None
    return val


def load_request(
    file: Optional[str] = None,
    property_name: Optional[str] = None,
    export_all: Optional[bool] = None,
    default_value: Optional[str] = None,
) -> ResolutionRequest:
    """Build the run configuration from explicit values and the runner environment."""
    try:
        return ResolutionRequest(
            file=get_input("file", file, required=True),
            property_name=get_input("property", property_name),
            export_all=resolve_bool(export_all, input_env_key("all"), False),
            default_value=get_input("default", default_value),
        )
    except ValidationError as e:
        raise InvalidInputError(f"Invalid inputs: {e}")

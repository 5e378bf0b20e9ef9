"""Reading the path environment variable at the command boundary.

The analysis functions take the raw path string as an argument; this
is the only place the process environment is consulted.
"""

import logging
import os
from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_ENV_VAR: str = "PATH"


class PathVariableNotSetError(Exception):
    """Raised when a required path variable is not set."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Environment variable {name} is not set")
        self.name = name


def read_path_variable(
    name: str = DEFAULT_ENV_VAR,
    *,
    required: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Read a path variable from the environment.

    Args:
        name: Environment variable name.
        required: Raise instead of returning an empty path when unset.
        environ: Environment mapping to read (defaults to os.environ).

    Returns:
        The variable's value, or an empty string if it is unset.

    Raises:
        PathVariableNotSetError: If the variable is unset and required.
    """
    env = os.environ if environ is None else environ
    value = env.get(name)
    if value is None:
        if required:
            raise PathVariableNotSetError(name)
        logger.debug("%s is not set, using an empty path", name)
        return ""
    return value

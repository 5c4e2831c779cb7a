"""Shell settings, read from environment variables.

The shell has no configuration file.  A handful of behaviours can be
switched with ``KEY=VALUE`` environment variables, the same mechanism
Unix programs have always used:

    - ``BUBBLE_VERBOSE``: echo step-by-step traces (``1``/``true``/``yes``/``on``).
    - ``BUBBLE_PROMPT``: replace the default ``<cwd> $ `` prompt.
    - ``BUBBLE_ENCODING``: text encoding for reading and writing files.

Everything else (name, version, build, author) is fixed package
metadata carried on the same object so commands like ``about`` have a
single place to look.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from bubble_os.errors import SHELL_NAME

VERSION = "1.0.0"
BUILD = 100
AUTHOR = "Arnav Thorat"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class Settings:
    """Immutable shell configuration."""

    name: str = SHELL_NAME
    version: str = VERSION
    build: int = BUILD
    author: str = AUTHOR
    verbose: bool = False
    prompt: str | None = None
    encoding: str = "utf-8"

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from *environ* (defaults to ``os.environ``).

        Unset or empty variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        verbose = env.get("BUBBLE_VERBOSE", "").strip().lower() in _TRUTHY
        prompt = env.get("BUBBLE_PROMPT") or None
        encoding = env.get("BUBBLE_ENCODING") or "utf-8"
        return cls(verbose=verbose, prompt=prompt, encoding=encoding)

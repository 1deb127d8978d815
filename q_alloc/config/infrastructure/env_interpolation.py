"""EnvResolver — substitutes ${NAME} references in raw config data."""

import os
import re
from collections.abc import Mapping
from typing import TypeAlias

_REFERENCE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


class EnvResolver:
    """Resolves ${NAME} references against an environment in a single walk.

    Unset names are left in place and listed in ``missing`` (each once, in the
    order first met) so the loader can report all of them together. Only
    strings are scanned; numbers, booleans and nulls pass through.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ
        self.missing: list[str] = []

    def resolve(self, data: RawValue) -> RawValue:
        if isinstance(data, str):
            return _REFERENCE.sub(self._substitute, data)
        if isinstance(data, list):
            return [self.resolve(item) for item in data]
        if isinstance(data, dict):
            return {key: self.resolve(value) for key, value in data.items()}
        return data

    def _substitute(self, match: re.Match[str]) -> str:
        name = match.group(1)
        value = self._environ.get(name)
        if value is not None:
            return value
        if name not in self.missing:
            self.missing.append(name)
        return match.group(0)

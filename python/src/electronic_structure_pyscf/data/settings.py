"""Typed, lockable configuration settings for algorithms."""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from collections.abc import Iterator, Mapping
from typing import Any

import numpy as np

__all__ = ["SettingNotFound", "SettingTypeMismatch", "Settings", "SettingsAreLocked"]


class SettingNotFound(KeyError):
    """Raised when a requested setting has not been declared."""


class SettingTypeMismatch(TypeError):
    """Raised when a setting value does not match the declared type."""


class SettingsAreLocked(RuntimeError):
    """Raised when modifying settings after they have been locked."""


def _is_int(value: Any) -> bool:
    return isinstance(value, int | np.integer) and not isinstance(value, bool | np.bool_)


def _is_double(value: Any) -> bool:
    return _is_int(value) or isinstance(value, float | np.floating)


_VALIDATORS = {
    "bool": lambda v: isinstance(v, bool | np.bool_),
    "int": _is_int,
    "double": _is_double,
    "string": lambda v: isinstance(v, str),
}

_CONVERTERS = {
    "bool": bool,
    "int": int,
    "double": float,
    "string": str,
}


class Settings:
    """Container of named, typed settings.

    Derived classes declare every setting with :meth:`_set_default`; only declared
    settings may be read or written, and values are checked against the declared
    type. Once :meth:`lock` is called (algorithms do so when they run) the settings
    become read-only.

    Supported type names are ``bool``, ``int``, ``double`` and ``string``.

    Examples:
        >>> class MySettings(Settings):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self._set_default("max_iterations", "int", 50)
        >>> settings = MySettings()
        >>> settings["max_iterations"] = 100
        >>> settings.get("max_iterations")
        100

    """

    def __init__(self) -> None:
        """Initialize an empty, unlocked settings container."""
        self._values: dict[str, Any] = {}
        self._types: dict[str, str] = {}
        self._locked = False

    def _set_default(self, name: str, type_name: str, default: Any) -> None:
        if type_name not in _VALIDATORS:
            raise ValueError(f"Unsupported setting type '{type_name}' for setting '{name}'")
        if not _VALIDATORS[type_name](default):
            raise SettingTypeMismatch(f"Default for setting '{name}' does not match type '{type_name}'")
        self._types[name] = type_name
        self._values[name] = _CONVERTERS[type_name](default)

    def get(self, name: str) -> Any:
        """Return the value of a setting.

        Raises:
            SettingNotFound: If the setting has not been declared.

        """
        if name not in self._values:
            raise SettingNotFound(f"Setting '{name}' not found. Available settings: {', '.join(self.keys())}")
        return self._values[name]

    def get_or_default(self, name: str, default: Any) -> Any:
        """Return the value of a setting, or ``default`` if it has not been declared."""
        return self._values.get(name, default)

    def set(self, name: str, value: Any) -> None:
        """Set the value of a declared setting.

        Raises:
            SettingsAreLocked: If the settings have been locked.
            SettingNotFound: If the setting has not been declared.
            SettingTypeMismatch: If the value does not match the declared type.

        """
        if self._locked:
            raise SettingsAreLocked(f"Cannot set '{name}': settings are locked")
        if name not in self._types:
            raise SettingNotFound(f"Setting '{name}' not found. Available settings: {', '.join(self.keys())}")
        type_name = self._types[name]
        if not _VALIDATORS[type_name](value):
            raise SettingTypeMismatch(
                f"Setting '{name}' expects type '{type_name}', got value {value!r} of type {type(value).__name__}"
            )
        self._values[name] = _CONVERTERS[type_name](value)

    def update(self, values: Mapping[str, Any]) -> None:
        """Set several settings at once."""
        for name, value in values.items():
            self.set(name, value)

    def has(self, name: str) -> bool:
        return name in self._values

    def get_type_name(self, name: str) -> str:
        if name not in self._types:
            raise SettingNotFound(f"Setting '{name}' not found")
        return self._types[name]

    def keys(self) -> list[str]:
        return list(self._values.keys())

    def to_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def lock(self) -> None:
        self._locked = True

    @property
    def locked(self) -> bool:
        return self._locked

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._values!r})"

"""Base class for immutable data classes with common serialization methods."""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

import json
from pathlib import Path
from typing import Any

import h5py

__all__: list[str] = []

_VERSION_KEY = "version"


def _validate_filename_suffix(filename: str | Path, data_type: str, operation: str) -> str:
    """Validate that filename has the correct data type suffix.

    Args:
        filename: Filename to validate (e.g., "h2.molecular_data.json")
        data_type: Expected data structure type (e.g., "molecular_data")
        operation: Operation type ("read" or "write") for error messages

    Returns:
        str: The original filename as string if valid

    Raises:
        ValueError: If filename doesn't have correct data type suffix

    Examples:
        Valid filenames:

        - ``h2.molecular_spec.json`` when ``data_type="molecular_spec"``
        - ``h2.molecular_data.h5`` when ``data_type="molecular_data"``

    """
    filename_str = str(filename)

    last_dot_idx = filename_str.rfind(".")
    if last_dot_idx == -1:
        raise ValueError(f"Invalid filename for {operation}: Filename '{filename_str}' must have '.{data_type}' suffix")

    base = filename_str[:last_dot_idx]

    second_last_dot_idx = base.rfind(".")
    if second_last_dot_idx == -1:
        raise ValueError(
            f"Invalid filename for {operation}: Filename '{filename_str}' "
            f"must have '.{data_type}.' before the file extension"
        )

    file_data_type = base[second_last_dot_idx + 1 :]
    if file_data_type != data_type:
        raise ValueError(
            f"Invalid filename for {operation}: Filename '{filename_str}' "
            f"has wrong data type '{file_data_type}', expected '{data_type}'"
        )

    return filename_str


def _major_version(version: str) -> str:
    return str(version).split(".", maxsplit=1)[0]


class DataClass:
    """Base class for immutable data classes with common serialization methods.

    This base class provides:

    - Immutability after construction (__setattr__ and __delattr__ protection)
    - Common implementations of to_json_file, to_hdf5_file, and to_file
    - Filename validation to enforce naming convention (.<data_type>.<extension>)
    - Serialization version stamping and checking

    Derived classes MUST implement:

    1. get_summary() -> str
    2. to_json() -> dict
    3. to_hdf5(group: h5py.Group) -> None
    4. from_json(json_data) and from_hdf5(group) classmethods

    Derived classes should:

    - Set all attributes before calling super().__init__()
    - Call super().__init__() at the end of __init__ to enable immutability
    - Set the _data_type_name and _serialization_version class attributes

    """

    _data_type_name: str | None = None

    _serialization_version: str = "0.1.0"

    def __init__(self) -> None:
        """Mark the instance as initialized; no attribute may change afterwards."""
        object.__setattr__(self, "_initialized", True)

    def __getattr__(self, name: str) -> Any:
        """Provide dynamic access to 'get_' prefixed methods as properties.

        Args:
            name: Attribute name

        Returns:
            Any: Value of the attribute named after the 'get_' prefix

        Raises:
            AttributeError: If no such attribute exists

        """
        if name.startswith("get_"):
            attr_name = name[4:]
            if attr_name in self.__dict__:
                value = self.__dict__[attr_name]
                return lambda: value
        raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        """Prevent attribute modification after initialization.

        Raises:
            AttributeError: If attempting to modify after initialization

        """
        if "_initialized" in self.__dict__:
            raise AttributeError(f"Cannot modify immutable {self.__class__.__name__} attribute '{name}'")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        """Prevent attribute deletion.

        Raises:
            AttributeError: Always, as deletion is not allowed

        """
        raise AttributeError(f"Cannot delete immutable {self.__class__.__name__} attribute '{name}'")

    def get_summary(self) -> str:
        """Get a human-readable summary of the object."""
        raise NotImplementedError(f"{self.__class__.__name__} must implement get_summary()")

    def __str__(self) -> str:
        return self.get_summary()

    def to_dict(self) -> dict[str, Any]:
        """Convert the object to a dictionary.

        Returns:
            dict: Dictionary representation of the object

        """
        return self.to_json()

    def to_json(self) -> dict[str, Any]:
        """Convert the object to a dictionary for JSON serialization."""
        raise NotImplementedError(f"{self.__class__.__name__} must implement to_json()")

    def to_hdf5(self, group: h5py.Group) -> None:
        """Save the object to an HDF5 group."""
        raise NotImplementedError(f"{self.__class__.__name__} must implement to_hdf5()")

    def to_json_file(self, filename: str | Path) -> None:
        """Save the object to a JSON file.

        Args:
            filename: Path to the output JSON file

                Must match pattern: <name>.<data_type>.json

        Raises:
            ValueError: If filename doesn't match required pattern

        """
        if self._data_type_name:
            _validate_filename_suffix(filename, self._data_type_name, "write")
        with Path(filename).open("w") as f:
            json.dump(self.to_json(), f, indent=2)

    def to_hdf5_file(self, filename: str | Path) -> None:
        """Save the object to an HDF5 file.

        Args:
            filename: Path to the output HDF5 file

                Must match pattern: <name>.<data_type>.h5 or <name>.<data_type>.hdf5

        Raises:
            ValueError: If filename doesn't match required pattern

        """
        if self._data_type_name:
            _validate_filename_suffix(filename, self._data_type_name, "write")
        with h5py.File(filename, "w") as f:
            self.to_hdf5(f)

    def to_file(self, filename: str | Path, format_type: str) -> None:
        """Save the object to a file with the specified format.

        Args:
            filename: Path to the output file
            format_type: Format type ("json", "hdf5", or "h5")

        Raises:
            ValueError: If format_type is not supported or filename doesn't match required pattern

        """
        if format_type == "json":
            self.to_json_file(filename)
        elif format_type in {"hdf5", "h5"}:
            self.to_hdf5_file(filename)
        else:
            raise ValueError(f"Unsupported format type: {format_type}")

    @classmethod
    def from_dict(cls, dict_data: dict[str, Any]) -> "DataClass":
        """Create an instance from a dictionary."""
        return cls.from_json(dict_data)

    @classmethod
    def from_json(cls, json_data: dict[str, Any]) -> "DataClass":
        """Create an instance from a JSON dictionary."""
        raise NotImplementedError(f"{cls.__name__} must implement from_json() classmethod")

    @classmethod
    def from_json_file(cls, filename: str | Path) -> "DataClass":
        """Load an instance from a JSON file.

        Args:
            filename: Path to the input JSON file

                Must match pattern: <name>.<data_type>.json

        Returns:
            DataClass: New instance of the derived class

        Raises:
            ValueError: If filename doesn't match required pattern

        """
        if cls._data_type_name:
            _validate_filename_suffix(filename, cls._data_type_name, "read")
        with Path(filename).open("r") as f:
            json_data = json.load(f)
        return cls.from_json(json_data)

    @classmethod
    def from_hdf5(cls, group: h5py.Group) -> "DataClass":
        """Load an instance from an HDF5 group."""
        raise NotImplementedError(f"{cls.__name__} must implement from_hdf5() classmethod")

    @classmethod
    def from_hdf5_file(cls, filename: str | Path) -> "DataClass":
        """Load an instance from an HDF5 file.

        Args:
            filename: Path to the input HDF5 file

                Must match pattern: <name>.<data_type>.h5 or <name>.<data_type>.hdf5

        Returns:
            DataClass: New instance of the derived class

        Raises:
            ValueError: If filename doesn't match required pattern

        """
        if cls._data_type_name:
            _validate_filename_suffix(filename, cls._data_type_name, "read")
        with h5py.File(filename, "r") as f:
            return cls.from_hdf5(f)

    @classmethod
    def from_file(cls, filename: str | Path, format_type: str) -> "DataClass":
        """Load an instance from a file with the specified format.

        Args:
            filename: Path to the input file
            format_type: Format type ("json", "hdf5", or "h5")

        Returns:
            DataClass: New instance of the derived class

        Raises:
            ValueError: If format_type is not supported or filename doesn't match required pattern

        """
        if format_type == "json":
            return cls.from_json_file(filename)
        if format_type in {"hdf5", "h5"}:
            return cls.from_hdf5_file(filename)
        raise ValueError(f"Unsupported format type: {format_type}")

    def _add_json_version(self, data: dict[str, Any]) -> dict[str, Any]:
        data[_VERSION_KEY] = self._serialization_version
        return data

    def _add_hdf5_version(self, group: h5py.Group) -> None:
        group.attrs[_VERSION_KEY] = self._serialization_version

    @staticmethod
    def _validate_json_version(expected: str, json_data: dict[str, Any]) -> None:
        """Check the serialization version of a JSON dictionary.

        Raises:
            RuntimeError: If the version field is missing or has a different major version.

        """
        if _VERSION_KEY not in json_data:
            raise RuntimeError("Serialized data is missing the 'version' field")
        found = str(json_data[_VERSION_KEY])
        if _major_version(found) != _major_version(expected):
            raise RuntimeError(f"Incompatible serialization version '{found}', expected '{expected}'")

    @staticmethod
    def _validate_hdf5_version(expected: str, group: h5py.Group) -> None:
        """Check the serialization version attribute of an HDF5 group.

        Raises:
            RuntimeError: If the version attribute is missing or has a different major version.

        """
        if _VERSION_KEY not in group.attrs:
            raise RuntimeError("Serialized data is missing the 'version' attribute")
        found = group.attrs[_VERSION_KEY]
        if isinstance(found, bytes):
            found = found.decode()
        if _major_version(found) != _major_version(expected):
            raise RuntimeError(f"Incompatible serialization version '{found}', expected '{expected}'")

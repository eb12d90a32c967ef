"""Molecular specification: geometry, basis set, charge and spin of a molecular system."""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

import h5py
import numpy as np

from electronic_structure_pyscf.data.base import DataClass

__all__ = ["Atom", "Geometry", "MolecularSpec"]


@dataclass(frozen=True)
class Atom:
    """A single atom: element label and Cartesian coordinates in Angstrom."""

    species: str
    coords: tuple[float, float, float]

    def __post_init__(self):
        if not isinstance(self.species, str) or not self.species:
            raise ValueError(f"Atom species must be a non-empty string, got {self.species!r}")
        coords = tuple(float(x) for x in self.coords)
        if len(coords) != 3:
            raise ValueError(f"Atom coordinates must have exactly 3 components, got {len(coords)}")
        object.__setattr__(self, "coords", coords)


def _atom_from_entry(entry: Any) -> Atom:
    if isinstance(entry, Atom):
        return entry
    if isinstance(entry, Sequence) and not isinstance(entry, str):
        if len(entry) == 4:
            return Atom(entry[0], tuple(entry[1:]))
        if len(entry) == 2 and isinstance(entry[1], Sequence | np.ndarray) and not isinstance(entry[1], str):
            return Atom(entry[0], tuple(entry[1]))
    raise ValueError(f"Geometry entries must be (species, (x, y, z)) or (species, x, y, z), got {entry!r}")


@dataclass(frozen=True)
class Geometry:
    """Ordered collection of atoms making up a molecule."""

    atoms: tuple[Atom, ...]

    def __post_init__(self):
        atoms = tuple(self.atoms)
        if not atoms:
            raise ValueError("Geometry must contain at least one atom")
        for atom in atoms:
            if not isinstance(atom, Atom):
                raise TypeError(f"Geometry expects Atom instances, got {type(atom).__name__}")
        object.__setattr__(self, "atoms", atoms)

    @classmethod
    def from_symbols_and_coordinates(cls, symbols: Sequence[str], coordinates: Any) -> Geometry:
        """Build a geometry from parallel sequences of element symbols and coordinates.

        Args:
            symbols: Element labels, one per atom.
            coordinates: Array-like of shape ``(n_atoms, 3)`` in Angstrom.

        Raises:
            ValueError: If the number of symbols and coordinate rows differ.

        """
        coords = np.asarray(coordinates, dtype=float).reshape(-1, 3)
        if len(symbols) != coords.shape[0]:
            raise ValueError(f"Got {len(symbols)} symbols but {coords.shape[0]} coordinate rows")
        return cls(tuple(Atom(str(s), tuple(row)) for s, row in zip(symbols, coords, strict=True)))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[Any]]) -> Geometry:
        """Build a geometry from ``(species, (x, y, z))`` pairs or flat ``(species, x, y, z)`` entries.

        Raises:
            ValueError: If an entry has neither form.

        """
        return cls(tuple(_atom_from_entry(entry) for entry in pairs))

    def __len__(self) -> int:
        return len(self.atoms)

    def __iter__(self) -> Iterator[Atom]:
        return iter(self.atoms)

    @property
    def symbols(self) -> list[str]:
        return [atom.species for atom in self.atoms]

    @property
    def coordinates(self) -> np.ndarray:
        return np.array([atom.coords for atom in self.atoms], dtype=float)


class MolecularSpec(DataClass):
    """Immutable input specification of a molecular electronic-structure problem.

    Attributes:
        geometry (Geometry): Ordered atoms with coordinates in Angstrom.
        basis (str): Basis set name, passed to the engine unchanged (e.g. ``"sto-3g"``).
        charge (int): Net charge of the molecule.
        spin (int): Number of unpaired electrons ``2S``; ``0`` denotes a closed shell.

    Examples:
        >>> spec = MolecularSpec([("H", (0.0, 0.0, 0.0)), ("H", (0.0, 0.0, 0.74))], "sto-3g")
        >>> spec.spin
        0

    """

    _data_type_name = "molecular_spec"

    _serialization_version = "0.1.0"

    def __init__(
        self,
        geometry: Geometry | Iterable[Sequence[Any]],
        basis: str,
        charge: int = 0,
        spin: int = 0,
    ) -> None:
        """Initialize a molecular specification.

        Args:
            geometry: A :class:`Geometry`, or an iterable of ``(species, (x, y, z))`` pairs
                or flat ``(species, x, y, z)`` entries.
            basis: Basis set name.
            charge: Net charge.
            spin: Number of unpaired electrons, ``>= 0``.

        Raises:
            TypeError: If charge or spin is not an integer, or basis is not a string.
            ValueError: If spin is negative, basis is empty or the geometry is malformed.

        """
        if not isinstance(geometry, Geometry):
            geometry = Geometry.from_pairs(geometry)
        if not isinstance(basis, str):
            raise TypeError(f"basis must be a string, got {type(basis).__name__}")
        if not basis:
            raise ValueError("basis must be a non-empty string")
        for name, value in (("charge", charge), ("spin", spin)):
            if isinstance(value, bool) or not isinstance(value, int | np.integer):
                raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
        if spin < 0:
            raise ValueError(f"spin must be >= 0, got {spin}")
        self.geometry = geometry
        self.basis = basis
        self.charge = int(charge)
        self.spin = int(spin)
        super().__init__()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MolecularSpec):
            return NotImplemented
        return (
            self.geometry == other.geometry
            and self.basis == other.basis
            and self.charge == other.charge
            and self.spin == other.spin
        )

    def __hash__(self) -> int:
        return hash((self.geometry, self.basis, self.charge, self.spin))

    def __repr__(self) -> str:
        return (
            f"MolecularSpec(geometry={self.geometry.symbols}, basis={self.basis!r}, "
            f"charge={self.charge}, spin={self.spin})"
        )

    @property
    def is_closed_shell(self) -> bool:
        return self.spin == 0

    def get_summary(self) -> str:
        """Get a human-readable summary of the specification."""
        lines = [
            "Molecular Specification",
            f"  Atoms: {len(self.geometry)} ({' '.join(self.geometry.symbols)})",
            f"  Basis: {self.basis}",
            f"  Charge: {self.charge}",
            f"  Spin (2S): {self.spin}",
        ]
        return "\n".join(lines)

    def to_json(self) -> dict[str, Any]:
        """Convert the specification to a dictionary for JSON serialization."""
        data = {
            "geometry": [{"species": atom.species, "coords": list(atom.coords)} for atom in self.geometry],
            "basis": self.basis,
            "charge": self.charge,
            "spin": self.spin,
        }
        return self._add_json_version(data)

    def to_hdf5(self, group: h5py.Group) -> None:
        """Save the specification to an HDF5 group.

        Args:
            group (h5py.Group): HDF5 group or file to write to.

        """
        self._add_hdf5_version(group)
        group.attrs["basis"] = self.basis
        group.attrs["charge"] = self.charge
        group.attrs["spin"] = self.spin
        group.create_dataset("symbols", data=np.array(self.geometry.symbols, dtype=h5py.string_dtype()))
        group.create_dataset("coordinates", data=self.geometry.coordinates)

    @classmethod
    def from_json(cls, json_data: dict[str, Any]) -> MolecularSpec:
        """Create a specification from a JSON dictionary.

        Raises:
            RuntimeError: If version field is missing or incompatible.

        """
        cls._validate_json_version(cls._serialization_version, json_data)
        geometry = Geometry(tuple(Atom(a["species"], tuple(a["coords"])) for a in json_data["geometry"]))
        return cls(
            geometry=geometry,
            basis=json_data["basis"],
            charge=int(json_data["charge"]),
            spin=int(json_data["spin"]),
        )

    @classmethod
    def from_hdf5(cls, group: h5py.Group) -> MolecularSpec:
        """Load a specification from an HDF5 group.

        Raises:
            RuntimeError: If version attribute is missing or incompatible.

        """
        cls._validate_hdf5_version(cls._serialization_version, group)
        symbols = list(group["symbols"].asstr()[:])
        coordinates = group["coordinates"][:]
        basis = group.attrs["basis"]
        if isinstance(basis, bytes):
            basis = basis.decode()
        return cls(
            geometry=Geometry.from_symbols_and_coordinates(symbols, coordinates),
            basis=str(basis),
            charge=int(group.attrs["charge"]),
            spin=int(group.attrs["spin"]),
        )

"""Molecular Hamiltonian data: nuclear repulsion plus one- and two-electron MO integrals."""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from __future__ import annotations

from typing import Any

import h5py
import numpy as np

from electronic_structure_pyscf.data.base import DataClass
from electronic_structure_pyscf.data.molecular_spec import MolecularSpec

__all__: list[str] = ["MolecularData"]


def _frozen_array(values: Any) -> np.ndarray:
    array = np.array(values, dtype=float, copy=True)
    array.setflags(write=False)
    return array


class MolecularData(DataClass):
    """Immutable record of the integrals defining a molecular electronic Hamiltonian.

    The two-body integrals are stored in full (unpacked) form and indexed in
    chemists' order, ``two_body_integrals[i, j, k, l] = (ij|kl)``.

    Attributes:
        spec (MolecularSpec): The specification the integrals were computed from.
        nuclear_repulsion (float): Nuclear repulsion energy in Hartree.
        one_body_integrals (numpy.ndarray): ``(n, n)`` one-electron integrals in the MO basis.
        two_body_integrals (numpy.ndarray): ``(n, n, n, n)`` two-electron integrals in the MO basis.

    """

    _data_type_name = "molecular_data"

    _serialization_version = "0.1.0"

    def __init__(
        self,
        spec: MolecularSpec,
        nuclear_repulsion: float,
        one_body_integrals: np.ndarray,
        two_body_integrals: np.ndarray,
    ) -> None:
        """Initialize the record.

        Args:
            spec: Originating molecular specification.
            nuclear_repulsion: Nuclear repulsion energy.
            one_body_integrals: Square matrix of one-electron MO integrals.
            two_body_integrals: Rank-4 tensor of two-electron MO integrals, chemists' order.

        Raises:
            TypeError: If spec is not a :class:`MolecularSpec`.
            ValueError: If the integral shapes are inconsistent.

        """
        if not isinstance(spec, MolecularSpec):
            raise TypeError(f"spec must be a MolecularSpec, got {type(spec).__name__}")
        one_body = _frozen_array(one_body_integrals)
        two_body = _frozen_array(two_body_integrals)
        if one_body.ndim != 2 or one_body.shape[0] != one_body.shape[1]:
            raise ValueError(f"one_body_integrals must be a square matrix, got shape {one_body.shape}")
        n_orbitals = one_body.shape[0]
        if two_body.shape != (n_orbitals,) * 4:
            raise ValueError(
                f"two_body_integrals must have shape {(n_orbitals,) * 4} to match one_body_integrals, "
                f"got {two_body.shape}"
            )
        self.spec = spec
        self.nuclear_repulsion = float(nuclear_repulsion)
        self.one_body_integrals = one_body
        self.two_body_integrals = two_body
        super().__init__()

    @property
    def n_orbitals(self) -> int:
        """Number of spatial molecular orbitals."""
        return self.one_body_integrals.shape[0]

    def get_summary(self) -> str:
        """Get a human-readable summary of the molecular data.

        Returns:
            str: Summary string describing the record.

        """
        lines = [
            "Molecular Data",
            f"  Atoms: {' '.join(self.spec.geometry.symbols)}",
            f"  Basis: {self.spec.basis}",
            f"  Charge: {self.spec.charge}, Spin (2S): {self.spec.spin}",
            f"  Molecular orbitals: {self.n_orbitals}",
            f"  Nuclear repulsion: {self.nuclear_repulsion:.10f}",
        ]
        return "\n".join(lines)

    def to_json(self) -> dict[str, Any]:
        """Convert the record to a dictionary for JSON serialization.

        Returns:
            dict[str, Any]: Dictionary representation of the record.

        """
        spec_data = self.spec.to_json()
        data = {
            "spec": spec_data,
            "nuclear_repulsion": self.nuclear_repulsion,
            "one_body_integrals": self.one_body_integrals.tolist(),
            "two_body_integrals": self.two_body_integrals.tolist(),
        }
        return self._add_json_version(data)

    def to_hdf5(self, group: h5py.Group) -> None:
        """Save the record to an HDF5 group.

        Args:
            group (h5py.Group): HDF5 group or file to write the record to.

        """
        self._add_hdf5_version(group)
        group.attrs["nuclear_repulsion"] = self.nuclear_repulsion
        group.create_dataset("one_body_integrals", data=self.one_body_integrals)
        group.create_dataset("two_body_integrals", data=self.two_body_integrals)
        self.spec.to_hdf5(group.create_group("spec"))

    @classmethod
    def from_json(cls, json_data: dict[str, Any]) -> MolecularData:
        """Create a record from a JSON dictionary.

        Raises:
            RuntimeError: If version field is missing or incompatible.

        """
        cls._validate_json_version(cls._serialization_version, json_data)
        return cls(
            spec=MolecularSpec.from_json(json_data["spec"]),
            nuclear_repulsion=json_data["nuclear_repulsion"],
            one_body_integrals=np.array(json_data["one_body_integrals"], dtype=float),
            two_body_integrals=np.array(json_data["two_body_integrals"], dtype=float),
        )

    @classmethod
    def from_hdf5(cls, group: h5py.Group) -> MolecularData:
        """Load a record from an HDF5 group.

        Raises:
            RuntimeError: If version attribute is missing or incompatible.

        """
        cls._validate_hdf5_version(cls._serialization_version, group)
        return cls(
            spec=MolecularSpec.from_hdf5(group["spec"]),
            nuclear_repulsion=float(group.attrs["nuclear_repulsion"]),
            one_body_integrals=group["one_body_integrals"][:],
            two_body_integrals=group["two_body_integrals"][:],
        )

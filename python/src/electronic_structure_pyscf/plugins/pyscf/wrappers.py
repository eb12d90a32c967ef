"""Wrappers around PySCF molecule and SCF calculation objects.

This module contains:

* :class:`PyscfMol`: a validated PySCF ``Mole`` handle
* :class:`ScfMethod`: the restricted / restricted-open-shell SCF variant tag
* :class:`PyscfScf`: an SCF calculation object bound to a molecule
* :func:`run_hartree_fock`: runs the SCF to convergence with engine output muted

The SCF object must be run with :func:`run_hartree_fock` before any integrals are
extracted from it, since orbital coefficients are only populated by the run.

>>> pymol = PyscfMol.from_spec(spec)
>>> pyscf_scf = run_hartree_fock(PyscfScf.from_mol(pymol))
>>> pyscf_scf.converged
True
"""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from electronic_structure_pyscf.plugins.pyscf.conversion import to_pyscf
from electronic_structure_pyscf.plugins.pyscf.engine import PyscfEngine, default_engine

if TYPE_CHECKING:
    from electronic_structure_pyscf.data import MolecularSpec

_LOGGER = logging.getLogger(__name__)

__all__ = ["PyscfMol", "PyscfScf", "ScfMethod", "ScfNotConvergedError", "muted_verbosity", "run_hartree_fock"]


class ScfNotConvergedError(RuntimeError):
    """Raised when an SCF run that was required to converge did not."""


class ScfMethod(StrEnum):
    """SCF variant, selected from the spin of the molecule.

    Attributes:
        RHF: Restricted Hartree-Fock, for closed shells.
        ROHF: Restricted open-shell Hartree-Fock, for non-zero spin.

    """

    RHF = "rhf"
    ROHF = "rohf"

    @classmethod
    def _missing_(cls, value):  # make input case-insensitive
        if isinstance(value, str):
            for member in cls:
                if member.value.upper() == value.upper():
                    return member
        raise ValueError(f"{value} is not a valid {cls.__name__}")

    @classmethod
    def from_spin(cls, spin: int) -> ScfMethod:
        """Return ``ROHF`` for non-zero spin and ``RHF`` otherwise."""
        return cls.ROHF if spin != 0 else cls.RHF

    @property
    def constructor_name(self) -> str:
        """Name of the corresponding constructor in ``pyscf.scf``."""
        return self.value.upper()


class PyscfMol:
    """Wraps the Python class ``pyscf.gto.Mole``.

    Construction checks that the wrapped object is an instance of the engine's
    molecule class; the handle is read-only afterwards.
    """

    __slots__ = ("_engine", "_mol")

    def __init__(self, mol: Any, engine: PyscfEngine | None = None) -> None:
        """Wrap an already-built PySCF molecule.

        Args:
            mol: The PySCF molecule.
            engine: Engine handle; the process default is used when omitted.

        Raises:
            TypeError: If ``mol`` is not an instance of the engine's molecule class.

        """
        engine = engine or default_engine()
        expected = engine.mole_class
        if not isinstance(mol, expected):
            raise TypeError(f"`PyscfMol` expecting python class `{expected.__name__}`, got `{type(mol).__name__}`.")
        self._engine = engine
        self._mol = mol

    @classmethod
    def from_spec(cls, spec: MolecularSpec, engine: PyscfEngine | None = None) -> PyscfMol:
        """Convert ``spec`` to a built PySCF molecule and wrap it."""
        engine = engine or default_engine()
        return cls(to_pyscf(spec, engine), engine)

    @property
    def mol(self) -> Any:
        """The underlying ``pyscf.gto.Mole``."""
        return self._mol

    @property
    def engine(self) -> PyscfEngine:
        return self._engine

    @property
    def spin(self) -> int:
        return self._mol.spin

    def __repr__(self) -> str:
        return f"PyscfMol(natm={self._mol.natm}, basis={self._mol.basis!r}, spin={self.spin})"


class PyscfScf:
    """Wraps an SCF calculation object from PySCF.

    The SCF object is the central object for the integral calculations. It must be
    run with :func:`run_hartree_fock` before any integrals are computed from it.
    """

    __slots__ = ("_method", "_scf")

    def __init__(self, scf: Any, method: ScfMethod) -> None:
        """Wrap an SCF calculation object.

        Args:
            scf: The PySCF SCF object.
            method: The SCF variant the object was constructed as.

        """
        self._scf = scf
        self._method = ScfMethod(method)

    @classmethod
    def from_mol(cls, pymol: PyscfMol) -> PyscfScf:
        """Construct the SCF object appropriate for the spin of ``pymol``.

        Non-zero spin selects restricted open-shell Hartree-Fock, closed shells
        select restricted Hartree-Fock. The returned calculation has not been run.
        """
        method = ScfMethod.from_spin(pymol.spin)
        _LOGGER.debug("Selected %s for spin %d", method.constructor_name, pymol.spin)
        constructor = getattr(pymol.engine.scf, method.constructor_name)
        return cls(constructor(pymol.mol), method)

    @property
    def scf(self) -> Any:
        """The underlying PySCF SCF object."""
        return self._scf

    @property
    def method(self) -> ScfMethod:
        return self._method

    @property
    def verbose(self) -> int:
        return self._scf.verbose

    @property
    def converged(self) -> bool:
        return bool(self._scf.converged)

    @property
    def mo_coeff(self) -> Any:
        return self._scf.mo_coeff

    def __repr__(self) -> str:
        return f"PyscfScf(method={self._method.constructor_name}, converged={self._scf.converged})"


@contextlib.contextmanager
def muted_verbosity(scf: Any) -> Iterator[Any]:
    """Set ``scf.verbose`` to 0 for the duration of the block.

    The previous verbosity is restored on exit, including when the block raises.
    """
    verbose = scf.verbose
    scf.verbose = 0
    try:
        yield scf
    finally:
        scf.verbose = verbose


def run_hartree_fock(pyscf_scf: PyscfScf, require_convergence: bool = False) -> PyscfScf:
    """Perform the Hartree-Fock calculation using the SCF object of ``pyscf_scf``.

    This must be called before any integrals are computed from ``pyscf_scf``.
    Engine output is silenced during the run and the verbosity setting restored
    afterwards; errors raised by the engine propagate unchanged.

    Args:
        pyscf_scf: The SCF wrapper to run, updated in place.
        require_convergence: Raise if the SCF does not converge.

    Returns:
        PyscfScf: ``pyscf_scf`` itself, now holding a converged calculation.

    Raises:
        ScfNotConvergedError: If ``require_convergence`` is set and the SCF did not converge.

    """
    with muted_verbosity(pyscf_scf.scf) as scf:
        energy = scf.kernel()
    if not pyscf_scf.converged:
        _LOGGER.warning("%s did not converge (last energy %s)", pyscf_scf.method.constructor_name, energy)
        if require_convergence:
            raise ScfNotConvergedError(
                f"{pyscf_scf.method.constructor_name} did not converge within {scf.max_cycle} iterations"
            )
    else:
        _LOGGER.debug("%s converged, E = %.12f", pyscf_scf.method.constructor_name, energy)
    return pyscf_scf

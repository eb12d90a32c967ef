"""Handle on the PySCF numerical engine.

The engine is loaded once, during process setup, and the resulting
:class:`PyscfEngine` value is passed to every pipeline call. Callers that do not
pass one get the lazily-loaded process default from :func:`default_engine`.

>>> from electronic_structure_pyscf.plugins.pyscf.engine import load_engine
>>> engine = load_engine()
>>> mol = engine.gto.Mole(atom="H 0 0 0; H 0 0 0.74", basis="sto-3g")
"""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

import functools
import importlib
import logging
from dataclasses import dataclass
from types import ModuleType

_LOGGER = logging.getLogger(__name__)

__all__ = ["EngineLoadError", "PyscfEngine", "default_engine", "load_engine"]


class EngineLoadError(ImportError):
    """Raised when the numerical engine cannot be imported."""


@dataclass(frozen=True)
class PyscfEngine:
    """Entry points of the PySCF engine used by the integral pipeline.

    Attributes:
        gto: Module providing the ``Mole`` molecule class.
        scf: Module providing the ``RHF`` and ``ROHF`` SCF methods.
        ao2mo: Module providing the ``kernel`` and ``restore`` integral routines.

    """

    gto: ModuleType
    scf: ModuleType
    ao2mo: ModuleType

    @property
    def mole_class(self) -> type:
        """The engine's molecule class."""
        return self.gto.Mole


def load_engine(module_name: str = "pyscf") -> PyscfEngine:
    """Import the engine and return a handle on it.

    Args:
        module_name: Top-level package name of the engine.

    Returns:
        PyscfEngine: Handle exposing the ``gto``, ``scf`` and ``ao2mo`` modules.

    Raises:
        EngineLoadError: If the engine or one of its submodules cannot be imported.

    """
    try:
        gto = importlib.import_module(f"{module_name}.gto")
        scf = importlib.import_module(f"{module_name}.scf")
        ao2mo = importlib.import_module(f"{module_name}.ao2mo")
    except ImportError as err:
        raise EngineLoadError(f"Unable to load python module {module_name}.") from err
    _LOGGER.debug("Loaded numerical engine '%s'", module_name)
    return PyscfEngine(gto=gto, scf=scf, ao2mo=ao2mo)


@functools.cache
def default_engine() -> PyscfEngine:
    """Return the process-wide default engine, loading it on first use."""
    return load_engine()

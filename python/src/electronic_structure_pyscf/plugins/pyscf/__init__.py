"""PySCF bindings: molecule conversion, SCF wrappers, MO integrals and the molecular data builder."""
# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

_loaded = False


def load():
    """Register the PySCF algorithms."""
    global _loaded  # noqa: PLW0603
    if _loaded:
        return
    _loaded = True

    from electronic_structure_pyscf.algorithms import register  # noqa: PLC0415
    from electronic_structure_pyscf.plugins.pyscf.molecular_data_builder import (  # noqa: PLC0415
        PyscfMolecularDataBuilder,
    )

    register(lambda: PyscfMolecularDataBuilder())

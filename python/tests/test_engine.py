"""Tests for loading the PySCF engine."""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

import pytest

from electronic_structure_pyscf.plugins.pyscf import conversion, wrappers
from electronic_structure_pyscf.plugins.pyscf.engine import EngineLoadError, PyscfEngine, default_engine, load_engine
from electronic_structure_pyscf.plugins.pyscf.molecular_data_builder import compute_molecular_data

try:
    import pyscf  # noqa: F401

    PYSCF_AVAILABLE = True
except ImportError:
    PYSCF_AVAILABLE = False


class TestEngineLoading:
    """Test cases for engine loading and its failure mode."""

    def test_missing_module(self):
        with pytest.raises(EngineLoadError, match=r"Unable to load python module no_such_engine_module\."):
            load_engine("no_such_engine_module")

    def test_load_error_is_import_error(self):
        with pytest.raises(ImportError):
            load_engine("no_such_engine_module")

    def test_engine_is_immutable(self, fake_engine):
        with pytest.raises(AttributeError):
            fake_engine.gto = None

    def test_mole_class(self, fake_engine):
        assert fake_engine.mole_class is fake_engine.gto.Mole

    def test_setup_engine_is_used_without_default(self, fake_engine, h2_closed_shell_spec, monkeypatch):
        def unavailable():
            raise EngineLoadError("Unable to load python module pyscf.")

        for module in (conversion, wrappers):
            monkeypatch.setattr(module, "default_engine", unavailable)
        molecular_data = compute_molecular_data(h2_closed_shell_spec, fake_engine)
        assert molecular_data.nuclear_repulsion == 0.75
        with pytest.raises(EngineLoadError, match=r"Unable to load python module pyscf\."):
            compute_molecular_data(h2_closed_shell_spec)

    @pytest.mark.skipif(not PYSCF_AVAILABLE, reason="PySCF not available")
    def test_load_pyscf(self):
        import pyscf.gto  # noqa: PLC0415

        engine = load_engine()
        assert isinstance(engine, PyscfEngine)
        assert engine.mole_class is pyscf.gto.Mole
        assert hasattr(engine.scf, "RHF")
        assert hasattr(engine.scf, "ROHF")
        assert hasattr(engine.ao2mo, "restore")

    @pytest.mark.skipif(not PYSCF_AVAILABLE, reason="PySCF not available")
    def test_default_engine_is_cached(self):
        assert default_engine() is default_engine()

"""Test configuration and fixtures for the electronic_structure_pyscf tests."""

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

import tempfile

import numpy as np
import pytest

from electronic_structure_pyscf.data import MolecularData

from .test_helpers import h2_spec, make_fake_engine


@pytest.fixture
def temp_directory():
    """Create a temporary directory for file-based tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def fake_engine():
    """An engine stand-in whose SCF runs converge."""
    return make_fake_engine()


@pytest.fixture
def h2_closed_shell_spec():
    """Closed-shell H2 in the minimal basis."""
    return h2_spec()


@pytest.fixture
def h2_cation_spec():
    """Open-shell H2+ (one unpaired electron) in the minimal basis."""
    return h2_spec(charge=1, spin=1)


@pytest.fixture
def basic_molecular_data():
    """A small, hand-built MolecularData record with chemists'-order symmetric integrals."""
    one_body = np.array([[-1.25, 0.1], [0.1, -0.47]])
    two_body = np.zeros((2, 2, 2, 2))
    two_body[0, 0, 0, 0] = 0.67
    two_body[1, 1, 1, 1] = 0.70
    two_body[0, 0, 1, 1] = two_body[1, 1, 0, 0] = 0.66
    for idx in [(0, 1, 0, 1), (1, 0, 1, 0), (0, 1, 1, 0), (1, 0, 0, 1)]:
        two_body[idx] = 0.18
    return MolecularData(h2_spec(), 0.7151043391, one_body, two_body)

"""
Aerodynamic Configuration Tests

Tests for loading, saving and overriding the aerodynamic coefficient table.
"""

import pytest
import numpy as np
import random
import os
import sys
import yaml

# Add repository root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fwparams.core.parameters import FWAerodynamicParameters, FWParameters
from fwparams.io.config import (
    aero_parameter_fields,
    load_aero_params,
    load_aero_params_yaml,
    aero_params_to_dict,
    save_aero_params_yaml,
    create_example_aero_config
)
from fwparams.exceptions import (
    ParameterLoadError,
    MissingKeyError,
    TypeMismatchError,
    DimensionMismatchError
)


AERO_KEYS = [
    'alpha_max', 'alpha_min',
    'c_drag_alpha', 'c_drag_beta', 'c_drag_delta_ail', 'c_drag_delta_flp',
    'c_side_force_beta',
    'c_lift_alpha', 'c_lift_delta_ail', 'c_lift_delta_flp',
    'c_roll_moment_beta', 'c_roll_moment_p', 'c_roll_moment_r',
    'c_roll_moment_delta_ail', 'c_roll_moment_delta_flp',
    'c_pitch_moment_alpha', 'c_pitch_moment_q', 'c_pitch_moment_delta_elv',
    'c_yaw_moment_beta', 'c_yaw_moment_r', 'c_yaw_moment_delta_rud',
    'c_thrust'
]

VECTOR_FIELDS = [(name, size) for name, size in aero_parameter_fields() if size is not None]


@pytest.fixture
def full_document():
    """Document overriding every aerodynamic key with non-default values."""
    doc = {}
    for i, (name, size) in enumerate(aero_parameter_fields()):
        if size is None:
            doc[name] = 0.1 * (i + 1) if name == 'alpha_max' else -0.1 * (i + 1)
        else:
            doc[name] = [1.0 / 3.0 * (i + 1) + k for k in range(size)]
    return doc


@pytest.fixture
def config_path():
    return os.path.join(os.path.dirname(__file__), '..', 'config', 'techpod_aero.yaml')


class TestParameterTable:
    """Test the key table derived from the schema."""

    def test_keys_in_load_order(self):
        """Test table lists every aerodynamic key in order."""
        assert [name for name, _ in aero_parameter_fields()] == AERO_KEYS

    def test_sizes(self):
        """Test scalar and vector sizes."""
        sizes = dict(aero_parameter_fields())

        assert sizes['alpha_max'] is None
        assert sizes['alpha_min'] is None
        assert sizes['c_lift_alpha'] == 4
        assert sizes['c_thrust'] == 3
        assert sizes['c_side_force_beta'] == 2
        assert len(VECTOR_FIELDS) == 20


class TestLoadAeroParams:
    """Test loading from parsed documents."""

    def test_partial_override(self):
        """Test alpha_max override leaves c_thrust at default."""
        params = FWParameters()

        applied = load_aero_params(params.aero_params, {'alpha_max': 0.35})

        assert applied == ['alpha_max']
        assert params.aero_params.alpha_max == 0.35
        assert np.array_equal(params.aero_params.c_thrust, [0.0, 14.7217, 0.0])

    def test_full_round_trip(self, full_document):
        """Test every key is loaded exactly."""
        aero = FWAerodynamicParameters()

        applied = load_aero_params(aero, full_document)

        assert applied == AERO_KEYS
        for name, value in full_document.items():
            assert np.array_equal(getattr(aero, name), value), name

    def test_partial_keeps_previous_load(self, full_document):
        """Test subset load keeps values from an earlier load."""
        aero = FWAerodynamicParameters()
        load_aero_params(aero, full_document)

        load_aero_params(aero, {'c_thrust': [1.0, 2.0, 3.0]})

        assert np.array_equal(aero.c_thrust, [1.0, 2.0, 3.0])
        assert np.array_equal(aero.c_lift_alpha, full_document['c_lift_alpha'])
        assert aero.alpha_min == full_document['alpha_min']

    def test_empty_document(self):
        """Test empty document changes nothing."""
        aero = FWAerodynamicParameters()

        assert load_aero_params(aero, {}) == []
        assert aero == FWAerodynamicParameters()

    def test_unknown_keys_ignored(self):
        """Test keys outside the table are ignored."""
        aero = FWAerodynamicParameters()

        applied = load_aero_params(aero, {'mass': 10.0, 'alpha_min': -0.3})

        assert applied == ['alpha_min']
        assert aero.alpha_min == -0.3

    def test_geometry_not_loaded(self):
        """Test vehicle geometry keys are not read into FWParameters."""
        params = FWParameters()

        load_aero_params(params.aero_params, {'mass': 10.0, 'wing_span': 5.0})

        assert params.mass == 2.65
        assert params.wing_span == 2.59

    def test_order_independence(self, full_document):
        """Test key order in the document does not change the result."""
        items = list(full_document.items())
        random.Random(42).shuffle(items)

        a = FWAerodynamicParameters()
        b = FWAerodynamicParameters()
        load_aero_params(a, full_document)
        load_aero_params(b, dict(items))

        assert a == b

    def test_loaded_arrays_are_copies(self):
        """Test loaded vectors do not alias the document lists."""
        doc = {'c_thrust': [1.0, 2.0, 3.0]}
        aero = FWAerodynamicParameters()

        load_aero_params(aero, doc)
        doc['c_thrust'][0] = 100.0

        assert aero.c_thrust[0] == 1.0

    @pytest.mark.parametrize('name,size', VECTOR_FIELDS)
    def test_dimension_enforced(self, name, size):
        """Test wrong vector lengths fail and leave the field unchanged."""
        for bad_size in (size - 1, size + 1):
            aero = FWAerodynamicParameters()
            before = getattr(aero, name).copy()

            with pytest.raises(DimensionMismatchError) as exc_info:
                load_aero_params(aero, {name: [0.5] * bad_size})

            assert exc_info.value.key == name
            assert exc_info.value.expected == size
            assert exc_info.value.actual == bad_size
            assert np.array_equal(getattr(aero, name), before)

    def test_example_dimension_mismatch(self):
        """Test c_drag_alpha with two entries reports 3 vs 2."""
        aero = FWAerodynamicParameters()

        with pytest.raises(DimensionMismatchError) as exc_info:
            load_aero_params(aero, {'c_drag_alpha': [1.0, 2.0]})

        assert exc_info.value.key == 'c_drag_alpha'
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_failed_load_commits_nothing(self, full_document):
        """Test fields read before the failing key are not modified."""
        full_document['c_thrust'] = [1.0]  # last key in load order
        aero = FWAerodynamicParameters()

        with pytest.raises(DimensionMismatchError):
            load_aero_params(aero, full_document)

        assert aero == FWAerodynamicParameters()

    def test_type_mismatch_aborts(self):
        """Test a mistyped scalar aborts the load."""
        aero = FWAerodynamicParameters()

        with pytest.raises(TypeMismatchError) as exc_info:
            load_aero_params(aero, {'alpha_max': 'high', 'c_thrust': [1.0, 2.0, 3.0]})

        assert exc_info.value.key == 'alpha_max'
        assert np.array_equal(aero.c_thrust, [0.0, 14.7217, 0.0])

    def test_strict_requires_all_keys(self):
        """Test strict mode rejects partial documents."""
        aero = FWAerodynamicParameters()

        with pytest.raises(MissingKeyError) as exc_info:
            load_aero_params(aero, {'alpha_max': 0.35}, strict=True)

        assert exc_info.value.key == 'alpha_min'
        assert aero.alpha_max == 0.27

    def test_strict_full_document(self, full_document):
        """Test strict mode accepts a complete document."""
        aero = FWAerodynamicParameters()

        assert load_aero_params(aero, full_document, strict=True) == AERO_KEYS

    def test_method_forwards(self):
        """Test FWAerodynamicParameters.load_aero_params method."""
        aero = FWAerodynamicParameters()

        aero.load_aero_params({'c_lift_delta_flp': [0.1, 0.2]})

        assert np.array_equal(aero.c_lift_delta_flp, [0.1, 0.2])

    def test_fwparameters_forwards_document(self):
        """Test FWParameters.load_aero_params updates only the aero table."""
        params = FWParameters()

        applied = params.load_aero_params({'alpha_max': 0.35, 'mass': 10.0})

        assert applied == ['alpha_max']
        assert params.aero_params.alpha_max == 0.35
        assert params.mass == 2.65


class TestYamlFiles:
    """Test loading and saving YAML files."""

    def test_load_shipped_config(self, config_path):
        """Test shipped Techpod file matches the built-in defaults."""
        aero = FWAerodynamicParameters()

        applied = load_aero_params_yaml(aero, config_path, strict=True)

        assert len(applied) == 22
        assert aero == FWAerodynamicParameters()

    def test_load_partial_file(self, tmp_path):
        """Test partial YAML file through FWParameters."""
        path = tmp_path / 'aero.yaml'
        path.write_text("alpha_max: 0.35\n")
        params = FWParameters()

        params.load_aero_params_yaml(path)

        assert params.aero_params.alpha_max == 0.35
        assert np.array_equal(params.aero_params.c_thrust, [0.0, 14.7217, 0.0])

    def test_load_bad_file(self, tmp_path):
        """Test dimension error from a YAML file."""
        path = tmp_path / 'aero.yaml'
        path.write_text("c_drag_alpha: [1.0, 2.0]\n")
        params = FWParameters()

        with pytest.raises(ParameterLoadError) as exc_info:
            params.load_aero_params_yaml(path)

        assert isinstance(exc_info.value, DimensionMismatchError)
        assert np.array_equal(params.aero_params.c_drag_alpha, [0.1360, -0.6737, 5.4546])

    def test_save_and_reload(self, tmp_path, full_document):
        """Test saved parameters reload identically."""
        original = FWAerodynamicParameters()
        load_aero_params(original, full_document)
        path = tmp_path / 'saved.yaml'

        save_aero_params_yaml(original, path)
        reloaded = FWAerodynamicParameters()
        load_aero_params_yaml(reloaded, path, strict=True)

        assert reloaded == original

    def test_saved_file_is_plain_yaml(self, tmp_path):
        """Test saved file contains plain floats and lists."""
        path = tmp_path / 'saved.yaml'

        save_aero_params_yaml(FWAerodynamicParameters(), path)
        with open(path) as f:
            doc = yaml.safe_load(f)

        assert list(doc) == AERO_KEYS
        assert doc['c_thrust'] == [0.0, 14.7217, 0.0]
        assert doc['alpha_max'] == 0.27


class TestExampleConfig:
    """Test conversion helpers."""

    def test_example_config(self):
        """Test example config matches defaults."""
        config = create_example_aero_config()

        assert config['alpha_min'] == -0.27
        assert config['c_lift_alpha'] == [0.2127, 10.8060, -46.8324, 60.6017]

    def test_to_dict_loads_back(self):
        """Test dict conversion is accepted by the loader."""
        aero = FWAerodynamicParameters()
        aero.c_thrust[1] = 20.0

        other = FWAerodynamicParameters()
        load_aero_params(other, aero_params_to_dict(aero), strict=True)

        assert other == aero

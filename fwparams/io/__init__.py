"""
Configuration input/output for fixed-wing parameters.

This module provides the generic YAML readers and the aerodynamic
configuration load/save functions.
"""

from .yaml_reader import read_param, read_vector, load_yaml_document
from .config import (
    aero_parameter_fields,
    load_aero_params,
    load_aero_params_yaml,
    aero_params_to_dict,
    save_aero_params_yaml,
    create_example_aero_config
)

__all__ = [
    'read_param',
    'read_vector',
    'load_yaml_document',
    'aero_parameter_fields',
    'load_aero_params',
    'load_aero_params_yaml',
    'aero_params_to_dict',
    'save_aero_params_yaml',
    'create_example_aero_config'
]

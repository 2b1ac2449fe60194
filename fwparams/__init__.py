"""
Fixed-wing vehicle parameters for flight-dynamics simulation.

Typed parameter records with compiled-in defaults, plus a YAML loader for
the aerodynamic coefficient table.
"""

from .core import ControlSurface, FWAerodynamicParameters, FWParameters
from .exceptions import (
    ParameterLoadError,
    MissingKeyError,
    TypeMismatchError,
    DimensionMismatchError
)
from .io import (
    read_param,
    read_vector,
    load_aero_params,
    load_aero_params_yaml,
    save_aero_params_yaml
)

__version__ = '0.1.0'

__all__ = [
    'ControlSurface',
    'FWAerodynamicParameters',
    'FWParameters',
    'ParameterLoadError',
    'MissingKeyError',
    'TypeMismatchError',
    'DimensionMismatchError',
    'read_param',
    'read_vector',
    'load_aero_params',
    'load_aero_params_yaml',
    'save_aero_params_yaml'
]

"""
Fixed-wing vehicle parameter schema.

This module provides the parameter records consumed by the force/moment
computation, initialized to the Techpod airframe defaults.
"""

from .parameters import ControlSurface, FWAerodynamicParameters, FWParameters

__all__ = [
    'ControlSurface',
    'FWAerodynamicParameters',
    'FWParameters'
]

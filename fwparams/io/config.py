"""
Aerodynamic Configuration System

Loads and saves the aerodynamic coefficient table of a fixed-wing vehicle
from YAML files. Only FWAerodynamicParameters is configurable; vehicle
geometry, inertia and control surfaces stay at their compiled defaults.
"""

import logging
import yaml
from dataclasses import fields
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..core.parameters import FWAerodynamicParameters
from ..exceptions import MissingKeyError
from .yaml_reader import read_param, read_vector, load_yaml_document

logger = logging.getLogger(__name__)


def aero_parameter_fields() -> List[Tuple[str, Optional[int]]]:
    """
    Key table of the aerodynamic configuration.

    Returns
    -------
    list of (str, int or None)
        (key, vector length) pairs in load order; the length is None for
        scalar entries
    """
    return [(f.name, f.metadata['size']) for f in fields(FWAerodynamicParameters)]


def load_aero_params(params: FWAerodynamicParameters,
                     document: Mapping[str, Any],
                     strict: bool = False) -> List[str]:
    """
    Override aerodynamic parameters from a parsed configuration mapping.

    Keys absent from the document keep their current values unless strict
    is set. Every read is staged on a copy and only committed once all of
    them succeed, so a failed load leaves params untouched.

    Parameters
    ----------
    params : FWAerodynamicParameters
        Parameters to update in place
    document : mapping
        Parsed configuration (typically from YAML)
    strict : bool
        Require every aerodynamic key to be present

    Returns
    -------
    list of str
        Keys that were read from the document

    Raises
    ------
    ParameterLoadError
        On the first missing (strict mode), mistyped or wrongly sized entry
    """
    staged = params.copy()
    applied = []

    for name, size in aero_parameter_fields():
        if name not in document:
            if strict:
                raise MissingKeyError(name)
            continue

        if size is None:
            value = read_param(document, name, float)
        else:
            value = read_vector(document, name, size)

        setattr(staged, name, value)
        applied.append(name)
        logger.debug(f"Read aerodynamic parameter {name} = {value}")

    known = {name for name, _ in aero_parameter_fields()}
    for key in document:
        if key not in known:
            logger.debug(f"Ignoring unknown configuration key: {key}")

    for name in applied:
        setattr(params, name, getattr(staged, name))

    return applied


def load_aero_params_yaml(params: FWAerodynamicParameters, yaml_file,
                          strict: bool = False) -> List[str]:
    """
    Override aerodynamic parameters from a YAML file.

    Parameters
    ----------
    params : FWAerodynamicParameters
        Parameters to update in place
    yaml_file : str or Path
        Path to YAML configuration file
    strict : bool
        Require every aerodynamic key to be present

    Returns
    -------
    list of str
        Keys that were read from the file

    Examples
    --------
    >>> params = FWParameters()
    >>> params.aero_params.load_aero_params_yaml('config/techpod_aero.yaml')
    """
    document = load_yaml_document(yaml_file)
    applied = load_aero_params(params, document, strict=strict)

    logger.info(f"Loaded {len(applied)} aerodynamic parameters from {yaml_file}")

    return applied


def aero_params_to_dict(params: FWAerodynamicParameters) -> Dict[str, Any]:
    """Convert aerodynamic parameters to plain floats and lists, in load order."""
    config = {}
    for name, size in aero_parameter_fields():
        value = getattr(params, name)
        if size is None:
            config[name] = float(value)
        else:
            config[name] = [float(v) for v in value]
    return config


def save_aero_params_yaml(params: FWAerodynamicParameters, yaml_file):
    """
    Save aerodynamic parameters to YAML file.

    Parameters
    ----------
    params : FWAerodynamicParameters
        Parameters to save
    yaml_file : str or Path
        Output YAML file path
    """
    with open(yaml_file, 'w') as f:
        yaml.safe_dump(aero_params_to_dict(params), f,
                       default_flow_style=None, sort_keys=False)

    logger.info(f"Aerodynamic configuration saved to: {yaml_file}")


def create_example_aero_config() -> Dict[str, Any]:
    """
    Create example aerodynamic configuration dictionary.

    Returns
    -------
    dict
        Default (Techpod) aerodynamic configuration
    """
    return aero_params_to_dict(FWAerodynamicParameters())

"""
Generic readers for YAML configuration documents.

A parsed document is a plain mapping from string keys to scalars or lists.
read_param and read_vector pull one named entry out of that mapping and
convert it to the destination type, raising a ParameterLoadError subclass
instead of substituting a default.
"""

import numbers
import re
import logging
import numpy as np
import yaml
from pathlib import Path
from typing import Any, Dict, Mapping

from ..exceptions import (
    ParameterLoadError,
    MissingKeyError,
    TypeMismatchError,
    DimensionMismatchError
)

logger = logging.getLogger(__name__)


class ConfigLoader(yaml.SafeLoader):
    """SafeLoader that also resolves exponent floats without a dot (1e-5, 3E+2)."""


ConfigLoader.add_implicit_resolver(
    'tag:yaml.org,2002:float',
    re.compile(r'^[-+]?[0-9][0-9_]*(?:\.[0-9_]*)?[eE][-+]?[0-9]+$'),
    list('-+0123456789')
)


def _lookup(node: Mapping[str, Any], name: str):
    if name not in node:
        raise MissingKeyError(name)
    return node[name]


def _to_float(value, name: str) -> float:
    # bool is an Integral; YAML 'true' is never a valid coefficient
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeMismatchError(name, 'a real number', value)
    return float(value)


def _to_int(value, name: str) -> int:
    if isinstance(value, bool):
        raise TypeMismatchError(name, 'an integer', value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return int(value)
    raise TypeMismatchError(name, 'an integer', value)


_CONVERTERS = {
    float: _to_float,
    int: _to_int
}


def read_param(node: Mapping[str, Any], name: str, value_type: type = float):
    """
    Read a scalar parameter from a configuration mapping.

    Parameters:
    -----------
    node : mapping
        Parsed configuration document
    name : str
        Key of the entry
    value_type : type
        float or int

    Returns:
    --------
    value : float or int
        Converted value

    Raises:
    -------
    MissingKeyError
        If name is not in node
    TypeMismatchError
        If the value cannot be converted to value_type
    """
    try:
        convert = _CONVERTERS[value_type]
    except KeyError:
        raise ValueError(f"Unsupported parameter type: {value_type!r}") from None

    return convert(_lookup(node, name), name)


def read_vector(node: Mapping[str, Any], name: str, size: int) -> np.ndarray:
    """
    Read a fixed-length numeric vector from a configuration mapping.

    Parameters:
    -----------
    node : mapping
        Parsed configuration document
    name : str
        Key of the entry
    size : int
        Required number of elements

    Returns:
    --------
    vector : np.ndarray, shape (size,)
        New float64 array with the elements in document order

    Raises:
    -------
    MissingKeyError
        If name is not in node
    TypeMismatchError
        If the value is not a sequence of real numbers
    DimensionMismatchError
        If the sequence length differs from size
    """
    value = _lookup(node, name)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise TypeMismatchError(name, f'a sequence of {size} real numbers', value)
        value = value.tolist()
    elif not isinstance(value, (list, tuple)):
        raise TypeMismatchError(name, f'a sequence of {size} real numbers', value)

    if len(value) != size:
        raise DimensionMismatchError(name, size, len(value))

    return np.array([_to_float(v, name) for v in value], dtype=np.float64)


def load_yaml_document(yaml_file) -> Dict[str, Any]:
    """
    Parse a YAML file into a configuration mapping.

    An empty file yields an empty mapping. Missing files raise
    FileNotFoundError.

    Parameters
    ----------
    yaml_file : str or Path
        Path to YAML configuration file

    Returns
    -------
    dict
        Top-level mapping of the document
    """
    path = Path(yaml_file)

    with open(path, 'r') as f:
        try:
            document = yaml.load(f, Loader=ConfigLoader)
        except yaml.YAMLError as e:
            raise ParameterLoadError(f"Invalid YAML in {path}: {e}") from e

    if document is None:
        logger.debug(f"Empty configuration document: {path}")
        return {}

    if not isinstance(document, dict):
        raise TypeMismatchError(str(path), 'a mapping at the document top level', document)

    return document

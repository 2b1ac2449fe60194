"""
Fixed-wing vehicle parameter set.

Holds the mass, geometry, inertia, control surface and aerodynamic
coefficient data consumed by the force/moment computation. Every field is
initialized from the defaults below (Techpod airframe, SI units), so a
default-constructed FWParameters is usable without any configuration file.

Only the aerodynamic table (FWAerodynamicParameters) can be overridden from
YAML; see fwparams.io.config.
"""

import copy
import numpy as np
from dataclasses import dataclass, field


# Default vehicle parameters (Techpod model)
DEFAULT_MASS = 2.65            # kg
DEFAULT_WING_SPAN = 2.59       # m
DEFAULT_WING_SURFACE = 0.47    # m^2
DEFAULT_CHORD_LENGTH = 0.18    # m

DEFAULT_INERTIA_XX = 0.16632   # kg*m^2
DEFAULT_INERTIA_XY = 0.0
DEFAULT_INERTIA_XZ = 0.0755
DEFAULT_INERTIA_YY = 0.3899
DEFAULT_INERTIA_YZ = 0.0
DEFAULT_INERTIA_ZZ = 0.5243

# Default aerodynamic parameter values (Techpod model)
DEFAULT_ALPHA_MAX = 0.27       # rad
DEFAULT_ALPHA_MIN = -0.27      # rad

DEFAULT_C_DRAG_ALPHA = (0.1360, -0.6737, 5.4546)
DEFAULT_C_DRAG_BETA = (0.0195, 0.0, -0.3842)
DEFAULT_C_DRAG_DELTA_AIL = (0.0195, 1.4205e-4, 7.5037e-6)
DEFAULT_C_DRAG_DELTA_FLP = (0.0195, 2.7395e-4, 1.23e-5)

DEFAULT_C_SIDE_FORCE_BETA = (0.0, -0.3073)

DEFAULT_C_LIFT_ALPHA = (0.2127, 10.8060, -46.8324, 60.6017)
DEFAULT_C_LIFT_DELTA_AIL = (0.3304, 0.0048)
DEFAULT_C_LIFT_DELTA_FLP = (0.3304, 0.0073)

DEFAULT_C_ROLL_MOMENT_BETA = (0.0, -0.0154)
DEFAULT_C_ROLL_MOMENT_P = (0.0, -0.1647)
DEFAULT_C_ROLL_MOMENT_R = (0.0, 0.0117)
DEFAULT_C_ROLL_MOMENT_DELTA_AIL = (0.0, 0.0570)
DEFAULT_C_ROLL_MOMENT_DELTA_FLP = (0.0, 0.001)

DEFAULT_C_PITCH_MOMENT_ALPHA = (0.0435, -2.9690)
DEFAULT_C_PITCH_MOMENT_Q = (-0.1173, -106.1541)
DEFAULT_C_PITCH_MOMENT_DELTA_ELV = (-0.1173, -6.1308)

DEFAULT_C_YAW_MOMENT_BETA = (0.0, 0.0430)
DEFAULT_C_YAW_MOMENT_R = (0.0, -0.0827)
DEFAULT_C_YAW_MOMENT_DELTA_RUD = (0.0, 0.06)

DEFAULT_C_THRUST = (0.0, 14.7217, 0.0)

# Default values for fixed-wing controls (Techpod model)
DEFAULT_CONTROL_SURFACE_DEFLECTION_MIN = np.radians(-20.0)
DEFAULT_CONTROL_SURFACE_DEFLECTION_MAX = np.radians(20.0)

DEFAULT_THROTTLE_CHANNEL = 5
DEFAULT_AILERON_LEFT_CHANNEL = 4
DEFAULT_AILERON_RIGHT_CHANNEL = 0
DEFAULT_ELEVATOR_CHANNEL = 1
DEFAULT_FLAP_CHANNEL = 2
DEFAULT_RUDDER_CHANNEL = 3


def coeff_vector(default, size: int = None):
    """
    Declare a fixed-length coefficient vector field.

    The length is stored in the field metadata and checked by the YAML
    loader, so it cannot be changed from configuration.

    Parameters:
    -----------
    default : sequence of float
        Default coefficients
    size : int, optional
        Fixed vector length (defaults to len(default))
    """
    if size is None:
        size = len(default)
    if len(default) != size:
        raise ValueError(f"Default has length {len(default)}, expected {size}")

    return field(default_factory=lambda: np.array(default, dtype=np.float64),
                 metadata={'size': size})


def scalar_param(default: float):
    """Declare a scalar aerodynamic field read from configuration."""
    return field(default=default, metadata={'size': None})


@dataclass
class ControlSurface:
    """One actuated surface: actuator channel and deflection limits (rad)."""
    channel: int
    deflection_min: float = DEFAULT_CONTROL_SURFACE_DEFLECTION_MIN
    deflection_max: float = DEFAULT_CONTROL_SURFACE_DEFLECTION_MAX

    def __post_init__(self):
        if self.deflection_min > self.deflection_max:
            raise ValueError(
                f"Deflection limits out of order: min={self.deflection_min} "
                f"> max={self.deflection_max}"
            )


@dataclass
class FWAerodynamicParameters:
    """
    Aerodynamic coefficient table for the lift/drag/moment model.

    Each c_* vector holds polynomial coefficients in ascending order of the
    state or control variable it is named after. Field declaration order is
    the order in which the loader reads them.
    """

    # Angle of attack bounds (rad)
    alpha_max: float = scalar_param(DEFAULT_ALPHA_MAX)
    alpha_min: float = scalar_param(DEFAULT_ALPHA_MIN)

    # Drag
    c_drag_alpha: np.ndarray = coeff_vector(DEFAULT_C_DRAG_ALPHA, 3)
    c_drag_beta: np.ndarray = coeff_vector(DEFAULT_C_DRAG_BETA, 3)
    c_drag_delta_ail: np.ndarray = coeff_vector(DEFAULT_C_DRAG_DELTA_AIL, 3)
    c_drag_delta_flp: np.ndarray = coeff_vector(DEFAULT_C_DRAG_DELTA_FLP, 3)

    # Side force
    c_side_force_beta: np.ndarray = coeff_vector(DEFAULT_C_SIDE_FORCE_BETA, 2)

    # Lift
    c_lift_alpha: np.ndarray = coeff_vector(DEFAULT_C_LIFT_ALPHA, 4)
    c_lift_delta_ail: np.ndarray = coeff_vector(DEFAULT_C_LIFT_DELTA_AIL, 2)
    c_lift_delta_flp: np.ndarray = coeff_vector(DEFAULT_C_LIFT_DELTA_FLP, 2)

    # Roll moment
    c_roll_moment_beta: np.ndarray = coeff_vector(DEFAULT_C_ROLL_MOMENT_BETA, 2)
    c_roll_moment_p: np.ndarray = coeff_vector(DEFAULT_C_ROLL_MOMENT_P, 2)
    c_roll_moment_r: np.ndarray = coeff_vector(DEFAULT_C_ROLL_MOMENT_R, 2)
    c_roll_moment_delta_ail: np.ndarray = coeff_vector(DEFAULT_C_ROLL_MOMENT_DELTA_AIL, 2)
    c_roll_moment_delta_flp: np.ndarray = coeff_vector(DEFAULT_C_ROLL_MOMENT_DELTA_FLP, 2)

    # Pitch moment
    c_pitch_moment_alpha: np.ndarray = coeff_vector(DEFAULT_C_PITCH_MOMENT_ALPHA, 2)
    c_pitch_moment_q: np.ndarray = coeff_vector(DEFAULT_C_PITCH_MOMENT_Q, 2)
    c_pitch_moment_delta_elv: np.ndarray = coeff_vector(DEFAULT_C_PITCH_MOMENT_DELTA_ELV, 2)

    # Yaw moment
    c_yaw_moment_beta: np.ndarray = coeff_vector(DEFAULT_C_YAW_MOMENT_BETA, 2)
    c_yaw_moment_r: np.ndarray = coeff_vector(DEFAULT_C_YAW_MOMENT_R, 2)
    c_yaw_moment_delta_rud: np.ndarray = coeff_vector(DEFAULT_C_YAW_MOMENT_DELTA_RUD, 2)

    # Thrust vs. throttle
    c_thrust: np.ndarray = coeff_vector(DEFAULT_C_THRUST, 3)

    def copy(self) -> 'FWAerodynamicParameters':
        """Return a copy with independent coefficient arrays."""
        return copy.deepcopy(self)

    def load_aero_params(self, document, strict: bool = False):
        """Override coefficients from a parsed configuration mapping."""
        from ..io.config import load_aero_params
        return load_aero_params(self, document, strict=strict)

    def load_aero_params_yaml(self, yaml_file, strict: bool = False):
        """Override coefficients from a YAML file."""
        from ..io.config import load_aero_params_yaml
        return load_aero_params_yaml(self, yaml_file, strict=strict)

    def __eq__(self, other):
        if not isinstance(other, FWAerodynamicParameters):
            return NotImplemented
        return all(np.array_equal(getattr(self, name), getattr(other, name))
                   for name in self.__dataclass_fields__)


@dataclass
class FWParameters:
    """
    Top-level fixed-wing vehicle description.

    Attributes
    ----------
    mass : float
        Vehicle mass (kg)
    wing_span : float
        Wing span (m)
    wing_surface : float
        Wing planform area (m^2)
    chord_length : float
        Mean chord (m)
    inertia_xx, inertia_xy, inertia_xz, inertia_yy, inertia_yz, inertia_zz : float
        Independent entries of the symmetric inertia tensor (kg*m^2)
    throttle_channel : int
        Actuator channel of the throttle
    aileron_left, aileron_right, elevator, flap, rudder : ControlSurface
        Control surface channels and deflection limits
    aero_params : FWAerodynamicParameters
        Aerodynamic coefficient table
    """

    mass: float = DEFAULT_MASS
    wing_span: float = DEFAULT_WING_SPAN
    wing_surface: float = DEFAULT_WING_SURFACE
    chord_length: float = DEFAULT_CHORD_LENGTH

    inertia_xx: float = DEFAULT_INERTIA_XX
    inertia_xy: float = DEFAULT_INERTIA_XY
    inertia_xz: float = DEFAULT_INERTIA_XZ
    inertia_yy: float = DEFAULT_INERTIA_YY
    inertia_yz: float = DEFAULT_INERTIA_YZ
    inertia_zz: float = DEFAULT_INERTIA_ZZ

    throttle_channel: int = DEFAULT_THROTTLE_CHANNEL

    aileron_left: ControlSurface = field(
        default_factory=lambda: ControlSurface(DEFAULT_AILERON_LEFT_CHANNEL))
    aileron_right: ControlSurface = field(
        default_factory=lambda: ControlSurface(DEFAULT_AILERON_RIGHT_CHANNEL))
    elevator: ControlSurface = field(
        default_factory=lambda: ControlSurface(DEFAULT_ELEVATOR_CHANNEL))
    flap: ControlSurface = field(
        default_factory=lambda: ControlSurface(DEFAULT_FLAP_CHANNEL))
    rudder: ControlSurface = field(
        default_factory=lambda: ControlSurface(DEFAULT_RUDDER_CHANNEL))

    aero_params: FWAerodynamicParameters = field(default_factory=FWAerodynamicParameters)

    @property
    def inertia(self) -> np.ndarray:
        """Symmetric 3x3 inertia tensor (kg*m^2)."""
        return np.array([
            [self.inertia_xx, self.inertia_xy, self.inertia_xz],
            [self.inertia_xy, self.inertia_yy, self.inertia_yz],
            [self.inertia_xz, self.inertia_yz, self.inertia_zz]
        ])

    @property
    def control_surfaces(self):
        """Control surfaces keyed by name."""
        return {
            'aileron_left': self.aileron_left,
            'aileron_right': self.aileron_right,
            'elevator': self.elevator,
            'flap': self.flap,
            'rudder': self.rudder
        }

    def load_aero_params(self, document, strict: bool = False):
        """Override the aerodynamic table from a parsed configuration mapping."""
        return self.aero_params.load_aero_params(document, strict=strict)

    def load_aero_params_yaml(self, yaml_file, strict: bool = False):
        """
        Override the aerodynamic table from a YAML file.

        Geometry, inertia and control surface fields are not read from
        configuration and keep their current values.
        """
        return self.aero_params.load_aero_params_yaml(yaml_file, strict=strict)

    def __repr__(self):
        """String representation."""
        return (f"FWParameters(mass={self.mass}, "
                f"wing_span={self.wing_span}, "
                f"wing_surface={self.wing_surface}, "
                f"chord_length={self.chord_length})")

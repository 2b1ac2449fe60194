"""
Aerodynamic Configuration Demonstration

Demonstrates the YAML-based aerodynamic configuration for the fixed-wing
parameter set. Shows how to:
- Construct parameters with built-in defaults
- Override the aerodynamic table from YAML
- Handle a malformed configuration
- Save and reload a configuration
- Plot the lift and drag polynomials over the alpha range
"""

import logging
import numpy as np
import matplotlib.pyplot as plt
import os
import tempfile

from fwparams import FWParameters, ParameterLoadError
from fwparams.io.config import load_aero_params, save_aero_params_yaml


def main():
    """Run aerodynamic configuration demonstration."""
    logging.basicConfig(level=logging.INFO)

    print("=" * 70)
    print("Aerodynamic Configuration Demonstration")
    print("=" * 70)
    print()

    # 1. Defaults
    print("1. Default parameters...")
    params = FWParameters()
    print(f"   {params}")
    print(f"   alpha range: [{np.degrees(params.aero_params.alpha_min):.1f}, "
          f"{np.degrees(params.aero_params.alpha_max):.1f}] deg")
    print(f"   c_thrust: {params.aero_params.c_thrust}")
    print()

    # 2. Load from YAML
    print("2. Loading aerodynamic configuration from YAML...")
    config_path = os.path.join(os.path.dirname(__file__), '..', 'config', 'techpod_aero.yaml')
    applied = params.load_aero_params_yaml(config_path)
    print(f"   Applied {len(applied)} keys")
    print()

    # 3. Partial override
    print("3. Partial override (alpha_max only)...")
    load_aero_params(params.aero_params, {'alpha_max': 0.35})
    print(f"   alpha_max: {params.aero_params.alpha_max}")
    print(f"   c_thrust:  {params.aero_params.c_thrust} (unchanged)")
    print()

    # 4. Malformed configuration
    print("4. Malformed configuration (c_drag_alpha with 2 entries)...")
    try:
        load_aero_params(params.aero_params, {'c_drag_alpha': [1.0, 2.0]})
    except ParameterLoadError as e:
        print(f"   Rejected: {e}")
    print(f"   c_drag_alpha: {params.aero_params.c_drag_alpha} (unchanged)")
    print()

    # 5. Save and reload
    print("5. Save and reload...")
    with tempfile.TemporaryDirectory() as tmpdir:
        out_file = os.path.join(tmpdir, 'aero.yaml')
        save_aero_params_yaml(params.aero_params, out_file)

        reloaded = FWParameters()
        reloaded.load_aero_params_yaml(out_file, strict=True)
        print(f"   Identical after reload: {reloaded.aero_params == params.aero_params}")
    print()

    # 6. Plot polynomials
    print("6. Plotting lift and drag vs. alpha...")
    aero = params.aero_params
    alpha = np.linspace(aero.alpha_min, aero.alpha_max, 200)
    # np.polyval wants highest order first
    CL = np.polyval(aero.c_lift_alpha[::-1], alpha)
    CD = np.polyval(aero.c_drag_alpha[::-1], alpha)

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].plot(np.degrees(alpha), CL, 'b-', linewidth=2)
    axes[0].set_xlabel('Alpha (deg)')
    axes[0].set_ylabel('CL')
    axes[0].set_title('Lift Coefficient')
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(CD, CL, 'r-', linewidth=2)
    axes[1].set_xlabel('CD')
    axes[1].set_ylabel('CL')
    axes[1].set_title('Drag Polar')
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    output_file = 'aero_config_demo.png'
    plt.savefig(output_file, dpi=150)
    print(f"   Saved plot to: {output_file}")
    print()


if __name__ == "__main__":
    main()

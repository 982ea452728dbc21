"""Physical constants and correlation coefficients used throughout DGS Thermal.

All values in SI units unless otherwise noted.
"""

import math

# Rotation
SECONDS_PER_MINUTE = 60.0
RPM_TO_RAD_S = 2.0 * math.pi / SECONDS_PER_MINUTE

# Static ring correlation (Dittus-Boelter form with seal correction factor B)
#   Nu_s = C_S · B · Re_ax^N_RE_S · Pr^N_PR_S
NU_STATIC_COEFF = 0.023
NU_STATIC_RE_EXP = 0.8
NU_STATIC_PR_EXP = 0.4

# Rotating ring correlation
#   Nu_r = C_R · [(W_ROT · Re_rot² + Re_ax²) · Pr]^(1/3)
NU_ROTATING_COEFF = 0.135
NU_ROTATING_ROT_WEIGHT = 0.5
NU_ROTATING_EXP = 1.0 / 3.0

# Advisory validity bands
PR_RANGE_DITTUS_BOELTER = (0.6, 160.0)
GAP_RANGE_TYPICAL = (1.0e-6, 20.0e-6)  # m — dry gas seal film thickness

# Atmospheric (reference gas state for property lookup)
P_ATM = 101325.0  # Pa
T_ATM = 288.15  # K

# Conversion factors
M_TO_UM = 1.0e6

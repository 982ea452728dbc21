"""DGS Thermal — heat transfer coefficients for dry gas seal rings."""

__app_name__ = "DGS Thermal"
__version__ = "0.1.0"

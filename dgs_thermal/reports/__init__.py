"""Report generation for DGS Thermal."""

"""Analysis helpers built on the heat transfer core (sweeps, assessments)."""

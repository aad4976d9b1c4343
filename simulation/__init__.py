"""Population enumeration and reporting."""

from simulation.enumeration import Report, build_report, enumerate_hands, percentile_index
from simulation.statistics import TypeDistribution

__all__ = ["Report", "TypeDistribution", "build_report", "enumerate_hands", "percentile_index"]

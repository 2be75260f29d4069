"""Weekly menu planner: a dish catalog and a generated week of meals."""

__version__ = "0.1.0"

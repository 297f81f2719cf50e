"""Console simulation of a stealth hostage rescue mission, with a CSV run log."""

__version__ = "0.1.0"
"""Career Compass: AI career guidance gateway and client for class 12 students."""

__version__ = "0.1.0"

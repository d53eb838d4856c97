"""Elite Dangerous trip planning: coordinates, EDSM and Spansh requests, system filtering and fleet carrier calculations."""

__version__ = "0.1.0"
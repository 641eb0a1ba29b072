"""payflow: routing geometry and connection handles for payment workflow canvases."""

__version__ = "0.1.0"

"""Parse, evaluate and plot a one-variable math expression as a text chart."""

__version__ = "0.1.0"
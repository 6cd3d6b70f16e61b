"""SciMark 2 numeric kernels, pi and sort demos, and Dhrystone data types."""

__version__ = "0.1.0"
"""Solutions to classic online-judge problems, as functions and string-in, string-out runners."""

__version__ = "0.1.0"
"""Colombian labor cost engine: payroll expenses plus employer provisions."""

__version__ = "0.1.0"

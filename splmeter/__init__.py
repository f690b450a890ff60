"""Sound level meter computing Z-, A- and C-weighted levels from calibrated samples."""

__version__ = "0.1.0"
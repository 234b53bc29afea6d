"""wet: a command line tool for retrieving weather data."""

PROGRAM_NAME = "wet"
__version__ = "1.0"

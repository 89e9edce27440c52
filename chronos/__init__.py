# chronos/__init__.py
# Chronos: drift-free stopwatch engine w/ laps, lap statistics & a terminal host

__version__ = "0.1.0"

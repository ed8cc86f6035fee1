"""Query AWS networking resources as tables"""

__version__ = "0.1.0"

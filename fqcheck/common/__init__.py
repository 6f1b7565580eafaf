"""
Shared I/O, logging and constants
"""
from .constants_and_defaults import *
from .io import *
from .logging import *

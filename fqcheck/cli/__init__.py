"""
Command line interface for fqcheck
"""
from .cli import *

"""
fqcheck subcommands. Every module here defining a `Command` class is registered automatically.
"""
from .base import *

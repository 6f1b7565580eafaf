"""
Reading, validating and reporting on FASTQ records
"""
from .errors import *
from .record import *
from .validator import *
from .scanner import *
from .options import *
from .runner import *

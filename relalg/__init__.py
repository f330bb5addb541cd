'''Binary relations and the relational calculus, with incrementally-tracked structural properties'''

# Add imports here
from .relations import *
from .mutils.containers import ImmutabilityError

from ._version import __version__

TOOLKIT_NAME : str = 'relalg, the Relational Algebra Toolkit'

"""randkit: random numbers, strings and synthetic filler text.

The core lives in :mod:`randkit.rand` (randomness sources, selection and the
word → sentence → paragraph generator).  Small pure helpers sit alongside it:
:mod:`randkit.text`, :mod:`randkit.numbers`, :mod:`randkit.colors`,
:mod:`randkit.dates`, :mod:`randkit.rules` and :mod:`randkit.urls`.  The
command line interface lives in :mod:`randkit.cli`.
"""

from .rand import (
    GenerationRequest,
    generate_text,
    next_int,
    pick_one,
    random_string,
    random_text,
)
from .utils.errors import EmptySequenceError, InvalidRangeError

__version__ = "0.1.0"

__all__ = [
    "EmptySequenceError",
    "GenerationRequest",
    "InvalidRangeError",
    "__version__",
    "generate_text",
    "next_int",
    "pick_one",
    "random_string",
    "random_text",
]

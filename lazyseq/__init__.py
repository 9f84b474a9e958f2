r"""
'  .__
'  |  | _____  ___________.__. ______ ____  ______
'  |  | \__  \ \___   <   |  |/  ___// __ \/ ____/
'  |  |__/ __ \_/    / \___  |\___ \\  ___< <_|  |
'  |____(____  /_____ \/ ____/____  >\___  >__   |
'            \/      \/\/         \/     \/   |__|
"""

# expose the main class
from .sequence import Sequence, pull

# expose the producers
from .factories import (
    from_iterable,
    iter_,
    S,
    empty,
    repeat,
    chain,
    compress,
    zip_,
    count,
    cycle,
    accumulate,
    tee,
    pairwise,
)

from .checks import ensure_same_length
from .rendezvous import RendezvousIterator, spawn

# expose configuration
from .config import SequenceConfig, configure, configured, get_config

# expose supporting types
from .types import (
    END,
    Value,
    Failure,
    SequenceError,
    is_failure,
    LENGTH_MISMATCH,
    INVALID_OPERATOR,
    POWER_OUT_OF_RANGE,
)

# define what `import *` does
__all__ = [
    "Sequence",
    "pull",
    "from_iterable",
    "iter_",
    "S",
    "empty",
    "repeat",
    "chain",
    "compress",
    "zip_",
    "count",
    "cycle",
    "accumulate",
    "tee",
    "pairwise",
    "ensure_same_length",
    "RendezvousIterator",
    "spawn",
    "SequenceConfig",
    "configure",
    "configured",
    "get_config",
    "END",
    "Value",
    "Failure",
    "SequenceError",
    "is_failure",
    "LENGTH_MISMATCH",
    "INVALID_OPERATOR",
    "POWER_OUT_OF_RANGE",
]

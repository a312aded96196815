"""Pure-function position analysis package.

Static threat detection works from the FEN placement field alone. Theme
scoring takes a full FEN (or chess.Board) and returns typed dataclass
instances. No engine, no side effects.
"""

# Re-export everything so `from boardlens.analysis import X` works
from boardlens.analysis.constants import *  # noqa: F401,F403
from boardlens.analysis.board_model import *  # noqa: F401,F403
from boardlens.analysis.vulnerability import *  # noqa: F401,F403
from boardlens.analysis.material import *  # noqa: F401,F403
from boardlens.analysis.activity import *  # noqa: F401,F403
from boardlens.analysis.positional import *  # noqa: F401,F403
from boardlens.analysis.pawns import *  # noqa: F401,F403
from boardlens.analysis.king_safety import *  # noqa: F401,F403
from boardlens.analysis.themes import *  # noqa: F401,F403

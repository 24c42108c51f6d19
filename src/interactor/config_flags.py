"""Feature flags for puzzle variants."""

import os


def is_king_moves_enabled() -> bool:
    return os.environ.get("INTERACTOR_ENABLE_KING_MOVES", "0") == "1"

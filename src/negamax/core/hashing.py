"""
Board hashing utilities - optimized for int8 arrays.
"""

import hashlib
from typing import Optional

import numpy as np


def hash_board(board: np.ndarray, current_player: Optional[int] = None) -> int:
    """
    Fast 64-bit hash for board state.

    Optimized for contiguous int8/int32 arrays (direct tobytes).
    Falls back to repr for object arrays.

    The side to move is folded in when given, so the same board with a
    different player to act hashes differently.
    """
    if board.dtype == np.object_:
        # Legacy object arrays - slower path
        data = repr(board.tolist()).encode()
    else:
        # Fast path for numeric arrays
        data = board.tobytes()

    # Shape matters: a 1x4 and a 2x2 board can share bytes
    data += repr(board.shape).encode()

    if current_player is not None:
        data += b"|" + str(current_player).encode()

    return int.from_bytes(hashlib.sha256(data).digest()[:8], "big")

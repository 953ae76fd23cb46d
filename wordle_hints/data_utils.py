from typing import List

import pandas as pd

from wordle_hints.constraints import SLOTS, WORD_LENGTH


def solutions_frame(patterns: List[str]) -> pd.DataFrame:
    """
    Tabulate patterns with one column per slot.
    Columns are 'pattern' followed by '1'..'5'.
    """
    columns = ["pattern"] + [str(s) for s in SLOTS]
    rows = []
    for p in patterns:
        if not isinstance(p, str) or len(p) != WORD_LENGTH:
            raise ValueError(f"pattern must be a string of length {WORD_LENGTH}: {p!r}")
        rows.append([p] + list(p))
    return pd.DataFrame(rows, columns=columns)

"""
Text renderers for matrices: display dump, TeX array markup and CSV.

All renderers take the logical (rows, cols) array, so output never depends
on storage order.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def format_number(value: float) -> str:
    """
    Shortest round-trip rendering; integral values print without '.0'.

    Negative zero prints as '0'.
    """
    v = float(value)
    if math.isnan(v):
        return 'NaN'
    if math.isinf(v):
        return 'Infinity' if v > 0 else '-Infinity'
    if v.is_integer() and abs(v) < 1e21:
        return str(int(v))
    return repr(v)


def display_string(logical: NDArray[np.float64]) -> str:
    """Header line plus one line per row, 3 decimals, comma separated."""
    rows, cols = logical.shape
    s = f"matrix col: {cols} row: {rows} \n"
    for i in range(rows):
        # + 0.0 turns -0.0 into 0.0
        s += ', '.join(f"{v + 0.0:.3f}" for v in logical[i])
        s += '\n'
    return s


def tex(logical: NDArray[np.float64]) -> str:
    r"""
    Parenthesised TeX array, one row per line.

    No math delimiters are emitted; wrap the output in $$ ... $$ (or an
    equation environment) to typeset it.

    Example for the 2x2 identity::

        \left(
        \begin{array}{cc}
        1 & 0 \\
        0 & 1
        \end{array}
        \right)
    """
    rows, cols = logical.shape
    lines = ['\\left(', f"\\begin{{array}}{{{'c' * cols}}}"]
    for i in range(rows):
        line = ' & '.join(format_number(v) for v in logical[i])
        if i != rows - 1:
            line += ' \\\\'
        lines.append(line)
    lines.append('\\end{array}')
    lines.append('\\right)')
    lines.append('')
    return '\n'.join(lines)


def csv(logical: NDArray[np.float64]) -> str:
    """Flat comma-separated list, row after row."""
    return ','.join(format_number(v) for v in logical.ravel())

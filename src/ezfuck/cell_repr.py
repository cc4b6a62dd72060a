from __future__ import annotations

from typing import Sequence


def produce_cells_repr(cells: Sequence[int], cell_ptr: int) -> str:
    """Render the tape up to the last non-zero cell (or the pointer, if further right).

          V
    i | 000 | 001 |
    d | 072 | 000 |
    a |  H  |     |
    """
    if len(cells) == 0:
        return ''

    last_i = 0
    for i in range(len(cells) - 1, -1, -1):
        if cells[i] != 0:
            last_i = i
            break
    last_i = min(max(last_i, cell_ptr), len(cells) - 1)

    ptr_row = ['  ']
    index_row = ['i ']
    raw_row = ['d ']
    ascii_row = ['a ']
    for i in range(last_i + 1):
        value = cells[i]
        ch = ' ' if value < 32 or 127 <= value < 160 else chr(value)
        ptr_row.append('   V  ' if i == cell_ptr else '      ')
        index_row.append(f"| {i:03d} ")
        raw_row.append(f"| {value:03d} ")
        ascii_row.append(f"|  {ch}  ")

    return f"{''.join(ptr_row)}\n{''.join(index_row)}|\n{''.join(raw_row)}|\n{''.join(ascii_row)}|\n"

from __future__ import annotations

from typing import Any


_np: Any | None = None
_EDGE_ITEMS: int = 4


def configure(*, np_module: Any | None, edge_items: int = 4) -> None:
    """Install the NumPy module used for printing and the initial edge width."""
    global _np
    _np = np_module
    set_edge_items(edge_items)


def set_edge_items(edge_items: int) -> None:
    global _EDGE_ITEMS
    value = int(edge_items)
    if value < 1:
        raise ValueError("edge_items must be >= 1")
    _EDGE_ITEMS = value


def get_edge_items() -> int:
    return _EDGE_ITEMS


def _visible_indices(length: int) -> tuple[list[int], list[int], bool]:
    """Indices printed before and after the "..." marker, and whether it is needed."""
    elided = length > 2 * _EDGE_ITEMS
    if not elided:
        return list(range(length)), [], False
    return list(range(_EDGE_ITEMS)), list(range(length - _EDGE_ITEMS, length)), True


def _format_value(value: Any) -> str:
    if _np is not None and isinstance(value, _np.generic):
        value = value.item()
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _format_row(row: Any, col_head: list[int], col_tail: list[int], truncated: bool) -> str:
    entries = [_format_value(row[col]) for col in col_head]
    if truncated:
        entries.append("...")
    entries.extend(_format_value(row[col]) for col in col_tail)
    return " ".join(entries)


def value_shape(value: Any) -> tuple[int, ...] | None:
    """Best-effort shape of a stored matrix value; None when it has none."""
    if value is None:
        return None
    shape = getattr(value, "shape", None)
    if shape is not None:
        try:
            return tuple(int(n) for n in shape)
        except TypeError:
            return None
    if _np is None:
        return None
    try:
        return tuple(int(n) for n in _np.shape(value))
    except ValueError:
        # Ragged nested sequences have no shape.
        return None


def matrix_str(self: Any) -> str:
    value = self.get()
    shape = value_shape(value)
    info = [f"shape={shape}", f"cached={self.has_inverse()}"]
    header = f"{self.__class__.__name__}({', '.join(info)})"

    if value is None:
        return header + "\n<no matrix>"
    if shape is None or len(shape) != 2:
        return header + "\n" + str(value)

    rows, cols = shape
    if rows == 0 or cols == 0:
        return header + "\n[]"

    data = _np.asarray(value) if _np is not None else value
    row_head, row_tail, rows_truncated = _visible_indices(rows)
    col_head, col_tail, cols_truncated = _visible_indices(cols)

    lines = [header, "["]
    for row_index in row_head:
        lines.append(f" [{_format_row(data[row_index], col_head, col_tail, cols_truncated)}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        lines.append(f" [{_format_row(data[row_index], col_head, col_tail, cols_truncated)}]")
    lines.append("]")
    return "\n".join(lines)


class MatrixMixin:
    def __str__(self) -> str:
        return matrix_str(self)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} shape={value_shape(self.get())} cached={self.has_inverse()}>"

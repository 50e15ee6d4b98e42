from __future__ import annotations

import io
import math
import re
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

FLOAT_FIELDS = ('weight', 'logP', 'tpsa', 'confidence')
INT_FIELDS = ('hbd', 'hba', 'rotatable_bonds', 'heavy_atoms')
EXPORT_COLUMNS = [
    'id', 'name', 'smiles', 'formula', 'prediction', 'confidence', 'weight', 'logP',
    'hbd', 'hba', 'tpsa', 'rotatable_bonds', 'heavy_atoms',
]

# 与前端一致：按数字前缀解析，"180.16 g/mol" -> 180.16
_FLOAT_PREFIX_RE = re.compile(r'^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')
_INT_PREFIX_RE = re.compile(r'^\s*[+-]?\d+')


def parse_float(value: Any, default: Optional[float] = None) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        match = _FLOAT_PREFIX_RE.match(value)
        if not match:
            return default
        value = match.group(0)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return number if math.isfinite(number) else default


def parse_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        match = _INT_PREFIX_RE.match(value)
        if not match:
            return default
        try:
            return int(match.group(0))
        except ValueError:
            return default
    number = parse_float(value)
    return int(number) if number is not None else default


def prediction_label(value: Any) -> Any:
    is_number = isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)
    if value == '1' or (is_number and value == 1):
        return 'BBB+'
    if value == '0' or (is_number and value == 0):
        return 'BBB-'
    return value


def process_molecule_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """Ensure numeric values are numbers and the prediction is a label."""
    processed = dict(row)
    for field in FLOAT_FIELDS:
        processed[field] = parse_float(row.get(field), 0.0)
    for field in INT_FIELDS:
        processed[field] = parse_int(row.get(field), 0)
    processed['prediction'] = prediction_label(row.get('prediction'))
    if processed.get('id') is not None:
        processed['id'] = str(processed['id'])
    return processed


def process_molecule_rows(rows: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [process_molecule_row(row) for row in rows]


def rows_to_csv(rows: List[Dict[str, Any]]) -> str:
    frame = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    buffer = io.StringIO()
    frame.to_csv(buffer, index=False)
    return buffer.getvalue()

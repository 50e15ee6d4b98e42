"""
Field normalizer: raw API rows -> canonical :class:`MoleculeRecord`.

Different dataset versions deliver the same compound with different property
names (``mw`` vs ``weight``, ``rotatable_bonds`` vs ``rotatableBonds``) and with
numbers encoded as JSON numbers, numeric strings or decimal strings. Everything
here is total: any input shape yields a record, never an exception.
"""
import logging
import math
import numbers
import re
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from .models import MoleculeRecord, PREDICTION_NEGATIVE, PREDICTION_POSITIVE

logger = logging.getLogger(__name__)

# Leading-number parse, so "180.16 g/mol" still yields 180.16
_FLOAT_PREFIX_RE = re.compile(r'^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')
_INT_PREFIX_RE = re.compile(r'^\s*[+-]?\d+')

# Current name first, legacy names after
FIELD_ALIASES = {
    'id': ('id', 'ID'),
    'name': ('name', 'Name'),
    'smiles': ('smiles', 'Smiles', 'SMILES'),
    'formula': ('formula', 'Formula'),
    'prediction': ('prediction', 'Prediction'),
    'confidence': ('confidence', 'Confidence'),
    'uncertainty': ('uncertainty', 'Uncertainty'),
    'weight': ('weight', 'mw', 'MW'),
    'logp': ('logP', 'logp', 'LogP'),
    'tpsa': ('tpsa', 'TPSA'),
    'hbd': ('hbd', 'HBD'),
    'hba': ('hba', 'HBA'),
    'rotatable_bonds': ('rotatableBonds', 'rotatable_bonds'),
    'heavy_atoms': ('heavyAtoms', 'heavy_atoms'),
}


def _pick(raw: Mapping, field: str) -> Any:
    for key in FIELD_ALIASES[field]:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def parse_float(value: Any) -> Optional[float]:
    """Parse a finite float out of ``value``; ``None`` when there is none."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Number):
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            return None
    elif isinstance(value, str):
        match = _FLOAT_PREFIX_RE.match(value)
        if not match:
            return None
        number = float(match.group(0))
    else:
        return None
    return number if math.isfinite(number) else None


def parse_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        match = _INT_PREFIX_RE.match(value)
        if not match:
            return None
        try:
            return int(match.group(0))
        except ValueError:
            # 超过 int 字符串位数上限
            return None
    number = parse_float(value)
    return int(number) if number is not None else None


def coerce_float(value: Any) -> float:
    number = parse_float(value)
    return number if number is not None else 0.0


def coerce_int(value: Any) -> int:
    number = parse_int(value)
    return number if number is not None else 0


def coerce_text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    return str(value)


def prediction_label(value: Any) -> Any:
    """Map the raw classification flag (1/0, "1"/"0") onto BBB+/BBB-.

    Values that are already labelled, or that we do not recognize, are
    returned unchanged.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, numbers.Number):
        if value == 1:
            return PREDICTION_POSITIVE
        if value == 0:
            return PREDICTION_NEGATIVE
        return value
    if isinstance(value, str):
        token = value.strip()
        if token == '1':
            return PREDICTION_POSITIVE
        if token == '0':
            return PREDICTION_NEGATIVE
    return value


def normalize_record(raw: Any) -> MoleculeRecord:
    """Build a canonical record from one raw row of arbitrary shape."""
    if not isinstance(raw, Mapping):
        raw = {}

    confidence = min(max(coerce_float(_pick(raw, 'confidence')), 0.0), 100.0)

    return MoleculeRecord(
        id=coerce_text(_pick(raw, 'id')),
        name=coerce_text(_pick(raw, 'name')),
        smiles=coerce_text(_pick(raw, 'smiles')),
        formula=coerce_text(_pick(raw, 'formula')),
        prediction=prediction_label(_pick(raw, 'prediction')),
        confidence=confidence,
        weight=coerce_float(_pick(raw, 'weight')),
        logp=coerce_float(_pick(raw, 'logp')),
        tpsa=coerce_float(_pick(raw, 'tpsa')),
        hbd=coerce_int(_pick(raw, 'hbd')),
        hba=coerce_int(_pick(raw, 'hba')),
        rotatable_bonds=coerce_int(_pick(raw, 'rotatable_bonds')),
        heavy_atoms=coerce_int(_pick(raw, 'heavy_atoms')),
        uncertainty=parse_float(_pick(raw, 'uncertainty')),
    )


def normalize_batch(raw_records: Iterable[Any]) -> List[MoleculeRecord]:
    """Normalize a whole sync batch.

    Rows without an id cannot be addressed by a route and are dropped; for
    duplicated ids the first row wins.
    """
    records: List[MoleculeRecord] = []
    seen_ids = set()
    for raw in raw_records:
        record = normalize_record(raw)
        if not record.id:
            logger.warning("Dropping molecule row without an id: %r", raw)
            continue
        if record.id in seen_ids:
            logger.warning("Dropping duplicate molecule id %s", record.id)
            continue
        seen_ids.add(record.id)
        records.append(record)
    return records

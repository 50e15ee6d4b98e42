import logging
import urllib.parse
from typing import Iterable, Optional, Tuple

import pandas as pd

logger = logging.getLogger(__name__)


def smiles_to_image(smiles: str, size: Tuple[int, int] = (400, 300)):
    """
    Render a SMILES string as a PIL image.
    Returns None for empty or unparseable SMILES; an invalid structure is a
    rendering problem, not a data problem.
    """
    if not smiles or not smiles.strip():
        return None
    try:
        from rdkit import Chem
        from rdkit.Chem import Draw
        mol = Chem.MolFromSmiles(smiles)
        if mol is None:
            logger.debug("RDKit could not parse SMILES %r", smiles)
            return None
        return Draw.MolToImage(mol, size=size)
    except Exception as e:
        logger.debug("RDKit drawing error for %r: %s", smiles, e)
        return None


def format_property(value, unit: str = '', digits: Optional[int] = None) -> str:
    if isinstance(value, float) and digits is not None:
        text = f"{value:.{digits}f}"
    else:
        text = str(value)
    return f"{text} {unit}".strip()


def format_timestamp(value) -> str:
    if value is None:
        return 'never'
    return value.astimezone().strftime('%Y-%m-%d %H:%M:%S')


def build_mailto_link(recipients: Iterable[str], subject: str, name: str, email: str, message: str) -> str:
    """Build the contact form's ``mailto:`` link with an encoded subject and body."""
    body = f"Name: {name}\nEmail: {email}\n\nMessage:\n{message}"
    query = urllib.parse.urlencode(
        {'subject': f"BrainRouteDB: {subject}", 'body': body},
        quote_via=urllib.parse.quote,
    )
    return f"mailto:{','.join(recipients)}?{query}"


def records_to_dataframe(records) -> pd.DataFrame:
    """Tabular view of canonical records, using the API's column names."""
    rows = [record.to_dict() for record in records]
    columns = ['id', 'name', 'formula', 'prediction', 'confidence', 'weight', 'logP',
               'hbd', 'hba', 'tpsa', 'rotatableBonds', 'heavyAtoms', 'smiles']
    return pd.DataFrame(rows, columns=columns)

"""Canonical molecule record shared by the sync pipeline and the views."""
from dataclasses import dataclass
from typing import Any, Dict, Optional

PREDICTION_POSITIVE = 'BBB+'
PREDICTION_NEGATIVE = 'BBB-'


@dataclass(frozen=True)
class MoleculeRecord:
    """One compound with its BBB permeability prediction.

    Instances are only produced by :func:`frontend.normalizer.normalize_record`,
    so numeric attributes are always finite numbers.
    """
    id: str = ''
    name: str = ''
    smiles: str = ''
    formula: str = ''
    prediction: Any = None
    confidence: float = 0.0
    weight: float = 0.0
    logp: float = 0.0
    tpsa: float = 0.0
    hbd: int = 0
    hba: int = 0
    rotatable_bonds: int = 0
    heavy_atoms: int = 0
    uncertainty: Optional[float] = None

    @property
    def is_permeable(self) -> bool:
        return self.prediction == PREDICTION_POSITIVE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the wire names the frontend has always consumed."""
        data = {
            'id': self.id,
            'name': self.name,
            'smiles': self.smiles,
            'formula': self.formula,
            'prediction': self.prediction,
            'confidence': self.confidence,
            'weight': self.weight,
            'logP': self.logp,
            'tpsa': self.tpsa,
            'hbd': self.hbd,
            'hba': self.hba,
            'rotatableBonds': self.rotatable_bonds,
            'heavyAtoms': self.heavy_atoms,
        }
        if self.uncertainty is not None:
            data['uncertainty'] = self.uncertainty
        return data

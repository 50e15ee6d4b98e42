"""Shared fixtures for the BrainRoute-DB test suite."""
import json

import pytest
from requests.structures import CaseInsensitiveDict

from frontend.normalizer import normalize_batch


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None, content_type='application/json'):
        self.status_code = status_code
        self.headers = CaseInsensitiveDict()
        if content_type is not None:
            self.headers['Content-Type'] = content_type
        if text is None:
            text = json.dumps(payload) if payload is not None else ''
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self):
        if not self.ok:
            import requests
            raise requests.exceptions.HTTPError(f"{self.status_code} error")


class FakeSession:
    """Stands in for requests.Session; replays queued responses or raises queued errors."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class FakeRepository:
    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error

    def fetch_rows(self):
        if self.error is not None:
            raise self.error
        return [dict(row) for row in self.rows]

    def check_connection(self):
        return self.error is None


@pytest.fixture
def raw_molecules():
    return [
        {
            'id': 'MOL-001', 'name': 'Aspirin', 'smiles': 'CC(=O)OC1=CC=CC=C1C(=O)O',
            'formula': 'C9H8O4', 'prediction': '0', 'confidence': '87.5',
            'weight': '180.158', 'logP': 1.19, 'hbd': '1', 'hba': 4, 'tpsa': 63.6,
            'rotatable_bonds': 3, 'heavy_atoms': '13',
        },
        {
            'id': 'MOL-002', 'name': 'Caffeine', 'smiles': 'CN1C=NC2=C1C(=O)N(C(=O)N2C)C',
            'formula': 'C8H10N4O2', 'prediction': 1, 'confidence': 92.1,
            'weight': 194.19, 'logP': '-0.07', 'hbd': 0, 'hba': '6', 'tpsa': '58.4',
            'rotatable_bonds': '0', 'heavy_atoms': 14,
        },
    ]


@pytest.fixture
def molecules(raw_molecules):
    return normalize_batch(raw_molecules)


@pytest.fixture
def envelope(raw_molecules):
    return {'success': True, 'count': len(raw_molecules), 'data': raw_molecules}


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def fake_repository():
    return FakeRepository

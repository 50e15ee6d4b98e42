"""Tests for the read-only molecule API."""
import csv
import io
from decimal import Decimal

import pytest

from api_server import create_app
from api_server_common_utils import process_molecule_row, rows_to_csv


@pytest.fixture
def db_rows():
    return [
        {
            'id': '2', 'name': 'Caffeine', 'smiles': 'CN1C=NC2=C1C(=O)N(C(=O)N2C)C', 'formula': 'C8H10N4O2',
            'prediction': '1', 'confidence': Decimal('92.1'), 'weight': Decimal('194.19'), 'logP': '-0.07',
            'hbd': 0, 'hba': '6', 'tpsa': None, 'rotatable_bonds': Decimal('0'), 'heavy_atoms': 14,
        },
        {
            'id': '1', 'name': 'Aspirin', 'smiles': 'CC(=O)OC1=CC=CC=C1C(=O)O', 'formula': 'C9H8O4',
            'prediction': 0, 'confidence': 87.5, 'weight': 'n/a', 'logP': 1.19,
            'hbd': '1', 'hba': 4, 'tpsa': 63.6, 'rotatable_bonds': 3, 'heavy_atoms': '13',
        },
    ]


@pytest.fixture
def client(fake_repository, db_rows):
    app = create_app(fake_repository(db_rows))
    app.config['TESTING'] = True
    return app.test_client()


def test_health(client):
    response = client.get('/api/health')
    assert response.status_code == 200
    body = response.get_json()
    assert body['status'] == 'ok'
    assert body['timestamp']


def test_molecules_envelope(client):
    response = client.get('/api/molecules')
    assert response.status_code == 200
    assert response.headers['Content-Type'].startswith('application/json')
    body = response.get_json()
    assert body['success'] is True
    assert body['count'] == 2
    caffeine, aspirin = body['data']
    assert caffeine['prediction'] == 'BBB+'
    assert caffeine['weight'] == pytest.approx(194.19)
    assert caffeine['tpsa'] == 0
    assert caffeine['hba'] == 6
    assert aspirin['prediction'] == 'BBB-'
    assert aspirin['weight'] == 0
    assert aspirin['heavy_atoms'] == 13


def test_molecules_database_error(fake_repository):
    app = create_app(fake_repository(error=RuntimeError('connection refused')))
    response = app.test_client().get('/api/molecules')
    assert response.status_code == 500
    body = response.get_json()
    assert body['success'] is False
    assert body['error'] == 'Internal server error'
    assert 'connection refused' in body['details']


def test_export_csv(client):
    response = client.get('/api/export')
    assert response.status_code == 200
    assert response.mimetype == 'text/csv'
    assert 'attachment' in response.headers['Content-Disposition']
    rows = list(csv.DictReader(io.StringIO(response.get_data(as_text=True))))
    assert [row['name'] for row in rows] == ['Caffeine', 'Aspirin']
    assert rows[0]['prediction'] == 'BBB+'


def test_export_database_error(fake_repository):
    app = create_app(fake_repository(error=RuntimeError('boom')))
    response = app.test_client().get('/api/export')
    assert response.status_code == 500


def test_cors_and_security_headers(client):
    response = client.get('/api/health')
    assert response.headers['Access-Control-Allow-Origin'] == '*'
    assert response.headers['X-Content-Type-Options'] == 'nosniff'


def test_preflight(client):
    response = client.open('/api/molecules', method='OPTIONS')
    assert response.status_code == 204
    assert 'GET' in response.headers['Access-Control-Allow-Methods']


def test_process_row_reads_leading_numbers():
    row = process_molecule_row({
        'id': 9, 'weight': '180.16 g/mol', 'logP': ' -1.5e1x', 'tpsa': '.5', 'confidence': 'n/a',
        'hbd': '3 donors', 'hba': '4.9', 'rotatable_bonds': 2.7, 'heavy_atoms': 10 ** 400,
    })
    assert row['weight'] == pytest.approx(180.16)
    assert row['logP'] == pytest.approx(-15.0)
    assert row['tpsa'] == pytest.approx(0.5)
    assert row['confidence'] == 0
    assert (row['hbd'], row['hba'], row['rotatable_bonds'], row['heavy_atoms']) == (3, 4, 2, 0)


def test_process_row_keeps_unknown_prediction():
    row = process_molecule_row({'id': 5, 'prediction': 'BBB+', 'name': 'X'})
    assert row['id'] == '5'
    assert row['prediction'] == 'BBB+'
    assert row['hbd'] == 0 and row['weight'] == 0.0


def test_rows_to_csv_header():
    text = rows_to_csv([])
    assert text.splitlines()[0].startswith('id,name,smiles,formula,prediction')

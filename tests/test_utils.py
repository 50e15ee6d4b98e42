"""Tests for presentation helpers that do not need a running Streamlit session."""
import urllib.parse

from frontend.utils import build_mailto_link, format_property, records_to_dataframe, smiles_to_image


def test_valid_smiles_renders_image():
    img = smiles_to_image('CC(=O)OC1=CC=CC=C1C(=O)O', size=(120, 90))
    assert img is not None
    assert img.size == (120, 90)


def test_invalid_smiles_is_not_fatal():
    assert smiles_to_image('C1CC(') is None
    assert smiles_to_image('') is None
    assert smiles_to_image('   ') is None


def test_format_property():
    assert format_property(180.158, 'g/mol', 3) == '180.158 g/mol'
    assert format_property(63.6, 'Å²', 1) == '63.6 Å²'
    assert format_property(4) == '4'


def test_mailto_link_encodes_subject_and_body():
    link = build_mailto_link(['a@example.org', 'b@example.org'], 'Data question', 'Ada', 'ada@example.org', 'Hi there')
    assert link.startswith('mailto:a@example.org,b@example.org?')
    query = urllib.parse.parse_qs(link.split('?', 1)[1])
    assert query['subject'] == ['BrainRouteDB: Data question']
    assert 'Name: Ada' in query['body'][0]
    assert query['body'][0].endswith('Hi there')


def test_records_to_dataframe(molecules):
    frame = records_to_dataframe(molecules)
    assert list(frame['id']) == ['MOL-001', 'MOL-002']
    assert 'rotatableBonds' in frame.columns

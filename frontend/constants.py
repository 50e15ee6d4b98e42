import config

API_URL = config.BRAINROUTE_API_URL
SYNC_INTERVAL_SECONDS = config.SYNC_INTERVAL_SECONDS
SYNC_REQUEST_TIMEOUT = config.SYNC_REQUEST_TIMEOUT
USE_DEMO_DATA = config.BRAINROUTE_DEMO_DATA

APP_TITLE = "BrainRoute-DB"
APP_SUBTITLE = "Molecular Intelligence Platform"
SEARCH_PLACEHOLDER = "Search by molecule name, SMILES, or ID..."

# 搜索匹配的字段（逻辑或）
SEARCH_FIELDS = ('name', 'smiles', 'id', 'formula')

PREDICTION_STYLE = {
    'BBB+': {'color': '#15803d', 'background': '#dcfce7', 'icon': '🟢'},
    'BBB-': {'color': '#b91c1c', 'background': '#fee2e2', 'icon': '🔴'},
}
UNKNOWN_PREDICTION_STYLE = {'color': '#475569', 'background': '#f1f5f9', 'icon': '⚪'}

# (属性名, 显示名, 单位, 小数位)
PROPERTY_DISPLAY = [
    ('weight', 'Molecular Weight', 'g/mol', 3),
    ('logp', 'LogP', '', 2),
    ('hbd', 'H-Bond Donors', '', None),
    ('hba', 'H-Bond Acceptors', '', None),
    ('tpsa', 'TPSA', 'Å²', 1),
    ('rotatable_bonds', 'Rotatable Bonds', '', None),
    ('heavy_atoms', 'Heavy Atoms', '', None),
]

STRUCTURE_SIZE_LARGE = (400, 300)
STRUCTURE_SIZE_THUMBNAIL = (160, 120)

# 首次同步成功前展示的演示数据（原始行格式，经过 normalizer 处理）
DEMO_MOLECULES = [
    {
        'id': 'MOL-001', 'name': 'Aspirin', 'smiles': 'CC(=O)OC1=CC=CC=C1C(=O)O',
        'formula': 'C9H8O4', 'prediction': 'BBB-', 'confidence': 87.5,
        'mw': 180.158, 'logp': 1.19, 'hbd': 1, 'hba': 4, 'tpsa': 63.6,
        'rotatable_bonds': 3, 'heavy_atoms': 13,
    },
    {
        'id': 'MOL-002', 'name': 'Caffeine', 'smiles': 'CN1C=NC2=C1C(=O)N(C(=O)N2C)C',
        'formula': 'C8H10N4O2', 'prediction': 'BBB+', 'confidence': 92.1,
        'mw': 194.19, 'logp': -0.07, 'hbd': 0, 'hba': 6, 'tpsa': 58.4,
        'rotatable_bonds': 0, 'heavy_atoms': 14,
    },
    {
        'id': 'MOL-003', 'name': 'Glucose', 'smiles': 'C(C1C(C(C(C(O1)O)O)O)O)O',
        'formula': 'C6H12O6', 'prediction': 'BBB-', 'confidence': 89.3, 'uncertainty': 10.2,
        'mw': 180.156, 'logp': -3.24, 'hbd': 5, 'hba': 6, 'tpsa': 110.4,
        'rotatable_bonds': 1, 'heavy_atoms': 12,
    },
]

# About / Contact 页面
TEAM_MEMBERS = [
    {'name': 'Soham Shirolkar', 'institution': 'University of South Florida, USA',
     'github': 'https://github.com/soham2400'},
    {'name': 'Lewis Tem', 'institution': 'University of Buea, Cameroon',
     'github': 'https://github.com/Mr-Nnobody'},
    {'name': 'Leah W. Cerere', 'institution': 'Mount Kenya University, Kenya',
     'github': 'https://github.com/leacere'},
    {'name': 'Noura E. Ahmed', 'institution': 'Munster Technological University, Ireland',
     'github': 'https://github.com/nouraahmed'},
    {'name': 'Georges Somé',
     'institution': 'Institut de Recherche en Sciences de la Santé, Ouagadougou, Burkina Faso',
     'github': None},
    {'name': 'Olaitan I. Awe', 'institution': 'Institute for Genomic Medicine Research, USA',
     'github': 'https://github.com/laitanawe'},
]

CONTACT_EMAILS = [
    'laitanawe@gmail.com',
    'sohamshirolkar24@gmail.com',
    'lewistem8@gmail.com',
]

GITHUB_REPOSITORY_URL = "https://github.com/omicscodeathon/brainroutedb"
GITHUB_ISSUES_URL = f"{GITHUB_REPOSITORY_URL}/issues"
BRAINROUTE_PLATFORM_URL = "https://huggingface.co/spaces/Nnobody/brainroute"

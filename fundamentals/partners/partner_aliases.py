"""
Curated partner tables.

EXCLUDED_PARTNERS lists mentions that are not counterparties: regulators and
government bodies, boilerplate phrases, pharma distributors (only strategic
relationships count), financing/M&A terms and standards bodies.

PARTNER_ALIASES maps lowercase raw mentions to one canonical company name.
Both tables are keyed in lowercase and never modified at runtime.
"""

from types import MappingProxyType

EXCLUDED_PARTNERS = frozenset({
    # Regulators and government bodies
    'fda',
    'u.s. food and drug administration',
    'food and drug administration',
    'european medicines agency',
    'european commission',
    'darpa',
    'barda',
    'national institutes of health',
    'national institutes',
    'national institutes of allergy and infectious diseases',
    'department of defense',
    'department of energy',
    'ftc',
    'federal trade commission',
    'securities and exchange commission',
    'us government',
    'u.s. government',
    'federal government',
    'uk health security agency',
    'taiwan food and drug administration',
    'ministry of health',
    'ministry of health labor and welfare of japan',
    'institute for life changing medicines',

    # Generic / boilerplate phrases
    'continued ai model collaborations',
    'enhanced cloud service partnerships',
    'cloud service providers',
    'global telecommunications service provider partners',
    'expanded content licensing agreements',
    'ai infrastructure buildout with cloud service providers',
    'manufacturing investments in u.s. domestic production',
    'strategic partners',
    'various partners',
    'channel partners',
    'hyperscalers',
    'customers',
    'suppliers',

    # Distributors (not strategic partners)
    'mckesson',
    'mckesson corp',
    'mckesson corporation',
    'cardinal health',
    'cencora',
    'amerisourcebergen',
    'fff enterprises',
    'besse medical',

    # Financing and M&A terms
    'blackstone life sciences',
    'royalty pharma',
    'royalty buyout',
    'convertible notes offering',
    'share repurchase program',
    'credit facility',
    'pending acquisition',

    # Standards bodies
    'north american charging standard',
    'north american charging standard (nacs) adoption',
    'nacs',
    'ieee',
})

_ALIASES = {
    # Cloud / AI platforms
    'openai': 'OpenAI',
    'openai global llc': 'OpenAI',
    'open ai': 'OpenAI',
    'microsoft': 'Microsoft',
    'msft': 'Microsoft',
    'microsoft corp': 'Microsoft',
    'microsoft corp.': 'Microsoft',
    'microsoft corporation': 'Microsoft',
    'microsoft azure': 'Microsoft',
    'azure': 'Microsoft',
    'amazon': 'Amazon',
    'amazon web services': 'Amazon',
    'aws': 'Amazon',
    'amazon.com': 'Amazon',
    'amazon.com inc.': 'Amazon',
    'google': 'Google',
    'google cloud': 'Google',
    'alphabet': 'Google',
    'alphabet inc.': 'Google',
    'oracle': 'Oracle',
    'oracle cloud infrastructure': 'Oracle',
    'nvidia': 'NVIDIA',
    'nvidia corporation': 'NVIDIA',
    'nvda': 'NVIDIA',
    'meta': 'Meta',
    'meta platforms': 'Meta',
    'anthropic': 'Anthropic',

    # Semiconductors / hardware
    'tsmc': 'TSMC',
    'taiwan semiconductor': 'TSMC',
    'taiwan semiconductor manufacturing company': 'TSMC',
    'samsung': 'Samsung',
    'samsung electronics': 'Samsung',
    'samsung bioepis': 'Samsung',
    'samsung bioepis (biosimilars)': 'Samsung',
    'sony': 'Sony',
    'sony playstation': 'Sony',
    'tencent': 'Tencent',
    'tencent (china joint venture)': 'Tencent',

    # Pharma / biotech
    'vertex': 'Vertex',
    'vertex pharmaceuticals': 'Vertex',
    'merck': 'Merck',
    'merck & co.': 'Merck',
    'crispr': 'CRISPR Therapeutics',
    'crispr therapeutics': 'CRISPR Therapeutics',
    'crispr therapeutics ag': 'CRISPR Therapeutics',
    'sanofi': 'Sanofi',
    'roche': 'Roche',
    'genentech': 'Roche',
    'moderna': 'Moderna',
    'takeda': 'Takeda',
    'takeda pharmaceutical company': 'Takeda',
    'astrazeneca': 'AstraZeneca',
    'bayer': 'Bayer',
    'eisai': 'Eisai',
    'eisai (leqembi)': 'Eisai',
    'pfizer': 'Pfizer',
    'pfizer inc.': 'Pfizer',
    'biontech': 'BioNTech',
    'biontech se': 'BioNTech',
    'gilead': 'Gilead',
    'gilead sciences': 'Gilead',
}

PARTNER_ALIASES = MappingProxyType(_ALIASES)

# A cleaned name starting with one of these describes an activity, not an entity
DESCRIPTION_PREFIXES = frozenset({
    'pending',
    'continued',
    'enhanced',
    'expanded',
    'new',
    'ongoing',
})

LEGAL_SUFFIXES = (
    'inc', 'incorporated', 'corp', 'corporation',
    'llc', 'ltd', 'plc', 'ag', 'nv', 'n.v', 'sa', 's.a', 'se', 'limited',
)

DEAL_SUFFIXES = (
    'collaboration', 'collaborations', 'partnership', 'partnerships',
    'deal', 'agreement', 'agreements', 'acquisition', 'transaction',
    'royalty buyout',
)

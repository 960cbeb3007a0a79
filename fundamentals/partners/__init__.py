from .partner_normalizer import normalize, normalize_partners, clean_partner_name, is_excluded
from .partner_audit import build_partner_audit

__all__ = ['normalize', 'normalize_partners', 'clean_partner_name', 'is_excluded', 'build_partner_audit']

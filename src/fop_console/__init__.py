"""
fop-console

Administrative command-line extensions for PrestaShop-style shops:
configuration export/import and command naming checks.
"""

__version__ = "1.0.0"

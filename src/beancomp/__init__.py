# beancomp - Beancount completion
"""
beancomp resolves completion context for Beancount ledgers parsed with
tree-sitter and produces date, account and transaction string suggestions.
"""

from beancomp.version import __version__

__all__ = ["__version__"]

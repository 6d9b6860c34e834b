# realizer/__init__.py
"""
Realizer - surface realisation for English and Spanish.

Turns language-independent phrase trees into inflected, punctuated text.
The package follows a Ports & Adapters layout:

- core/domain    element tree, features, syntax, morphology, orthography
- core/ports     interfaces the domain depends on (lexicon)
- core/use_cases entry points (RealiseText)
- adapters       JSON lexicon persistence
- shared         settings and logging
"""

__version__ = "0.1.0"

# tests/__init__.py
"""
Test Suite for the realizer.

Organization:
- `core`: element tree, features, morphology, syntax, orthography and use cases.
- `adapters`: the JSON lexicon adapter (loader, index, cache).
- `shared`: settings and dependency injection wiring.
"""

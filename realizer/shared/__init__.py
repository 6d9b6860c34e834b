# realizer/shared/__init__.py
"""
Shared utilities package.

Cross-cutting concerns used by the use cases and the adapters:
- Configuration management
- Structured logging
- Dependency Injection wiring
"""

# realizer/core/__init__.py
"""
Core of the realizer: pure domain logic, ports and use cases.

Nothing in here touches the filesystem or the environment directly;
that is the job of the adapters.
"""

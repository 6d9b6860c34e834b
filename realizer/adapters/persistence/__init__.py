# realizer/adapters/persistence/__init__.py

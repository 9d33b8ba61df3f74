# codegate/__init__.py
"""
codegate - structural validation gate for machine-generated UI code.
"""
__version__ = "1.0.0"

"""
Spell Service Tests Package
===========================
Test suite for the spell service modules.

Run all tests: python3 -m pytest tests/spellservice/ -v
Run specific: python3 -m pytest tests/spellservice/test_session.py -v
"""

__version__ = "1.0.0"

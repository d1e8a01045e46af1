"""
Test suite for the significant-figure quantity model and expression lexer

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Tests for the space colonization engine.

This package contains tests for:
- Vector arithmetic used as the default point type
- Engine growth rules, attractor lifecycle and structural invariants
- Configuration, scene sampling, export and visualization helpers
"""

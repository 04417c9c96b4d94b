"""
Core domain models, checksum arithmetic, notations, and contracts.

This module contains the pure building blocks of structcomm: nothing here
performs I/O or keeps cross-call state.
"""

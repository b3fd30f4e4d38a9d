"""Linear-storage container layer.

This module holds the key/value entry type and the associative array
that stores entries in a scanned, growable slot sequence.
"""

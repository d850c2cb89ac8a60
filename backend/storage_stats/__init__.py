"""
Storage Stats - per-collection storage size reporting for MongoDB clusters.
"""
__version__ = "0.1.0"

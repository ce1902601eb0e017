"""
DoOrDont - habit accountability backend
"""
__version__ = "0.1.0"

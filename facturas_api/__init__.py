"""
Facturas API Package

This package provides a read-only FastAPI server over the local
facturas_result.json file, plus a redirect to the DGII timbre
verification service.
"""

__version__ = "1.0.0"
__author__ = "Facturas API Team"

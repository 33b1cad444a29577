"""
ProEdit backend.

Projects, assets, tracks, clips and export jobs behind a small FastAPI
service. See ``proedit.store`` for the repository layer.
"""

__version__ = "0.1.0"

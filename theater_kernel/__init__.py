"""
Theater Kernel

Value objects, typed errors and structured logging shared by the
pricing engines, the configuration loaders and the statement renderers:
- Immutable plays, performances, invoices and catalogs
- Machine-readable error codes
- JSON log records with context propagation
"""

__version__ = "0.1.0"

"""
Export Package - Delimited Text Export.

Components:
    - Exporter: Titles header plus one quoted/unquoted line per record.
      The engine hands back text only; writing files or triggering
      downloads belongs to the presentation layer.
"""

from table_engine.export.exporter import Exporter

__all__ = ["Exporter"]

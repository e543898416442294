"""Pure report interpretation engine for rephrase.

This package turns a declarative report-document tree into fully-resolved
descriptors. It must not import Django or perform any I/O; the data bank is
passed in explicitly as a read-only lookup.
"""

from .databank import DataBank
from .dispatch import build_element, dispatch, render_document

__all__ = ["DataBank", "build_element", "dispatch", "render_document"]

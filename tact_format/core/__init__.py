"""
tact_format.core: shared source-location and diagnostic types.

Modules:
  - span: Interval/SourceRef
  - diagnostics: Diagnostic records built from source errors
"""

__all__ = [
	"span",
	"diagnostics",
]

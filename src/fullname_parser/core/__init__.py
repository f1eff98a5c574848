"""
fullname_parser.core package

Batch orchestration:

- context     (BatchContext)
- exceptions  (PipelineError and subclasses)
- pipeline    (BatchPipeline)

This __init__ intentionally exports NOTHING to avoid circular imports.
"""

__all__ = []

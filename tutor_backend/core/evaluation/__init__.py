"""
Response evaluation with an auxiliary grading model.
"""

from tutor_backend.core.evaluation.response_evaluator import (
    ResponseEvaluator,
    parse_grade,
    strip_code_fences,
)

__all__ = ["ResponseEvaluator", "parse_grade", "strip_code_fences"]

"""Operation result types and status enums.

Standardized result type for directory API calls, plus the classifier that
turns botocore exceptions into results.
"""

from infrastructure.operations.classifiers import classify_aws_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_aws_error",
]

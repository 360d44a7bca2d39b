"""
Business operation logging
"""

from typing import Optional

from fixit.core.logging_config import get_logger
from fixit.constants.operation_types import OperationResult

logger = get_logger(__name__)


def log_operation(
    operation_type: str,
    target: str,
    operator: str,
    result: str = OperationResult.SUCCESS,
    message: Optional[str] = None,
    remark: str = "",
):
    """
    Write one business log record.

    Args:
        operation_type: an OperationType constant
        target: id of the record acted on (ticket id, username, item id)
        operator: username of the session user
        result: OperationResult.SUCCESS or OperationResult.FAILED
        message: log message, defaults to "<operation_type> <result>"
        remark: free text stored in the remark field of the JSON log

    Example:
        log_operation(OperationType.TICKET_CREATE, "RE-2025-1234", "teacher01")
    """
    fields = {
        "operationObject": target,
        "operationType": operation_type,
        "operator": operator,
        "result": result,
        "remark": remark,
    }
    if result == OperationResult.SUCCESS:
        logger.info(message or f"{operation_type} {result}", extra=fields)
    else:
        logger.error(message or f"{operation_type} {result}", extra=fields)

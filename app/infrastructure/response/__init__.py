"""响应格式化基础设施组件导出"""

from .response_formatter import (
    error_body,
    error_response,
    message_response,
    not_found_response,
)

__all__ = [
    "error_body",
    "error_response",
    "message_response",
    "not_found_response",
]

from typing import Any, Dict

from fastapi.responses import JSONResponse


def error_body(msg: str) -> Dict[str, Any]:
    """
    创建错误响应体

    参数:
        msg: 错误消息

    返回:
        Dict[str, Any]: {"error": msg}
    """
    return {"error": msg}


def error_response(msg: str = "Erro interno do servidor", code: int = 500) -> JSONResponse:
    """
    创建错误响应

    参数:
        msg: 错误消息
        code: HTTP状态码，默认500

    返回:
        JSONResponse: 状态码为 code、内容为 {"error": msg} 的响应
    """
    return JSONResponse(content=error_body(msg), status_code=code)


def message_response(msg: str) -> Dict[str, Any]:
    """
    创建确认消息响应，例如删除成功

    返回:
        Dict[str, Any]: {"message": msg}
    """
    return {"message": msg}


def not_found_response(entity: str = "Registro") -> JSONResponse:
    """
    创建资源未找到响应

    参数:
        entity: 未找到的实体名称

    返回:
        JSONResponse: 404响应
    """
    return error_response(msg=f"{entity} não encontrado", code=404)

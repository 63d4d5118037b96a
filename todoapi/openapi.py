"""OpenAPI 3.0 document for the task API.

Built as a plain dict; served at ``/openapi.json`` and rendered by the
Swagger UI page under ``/api-docs/``.
"""
from __future__ import annotations

from typing import Any

from .errors import TASK_NOT_FOUND_MESSAGE, TITLE_RULE_MESSAGE
from .pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT
from .rate_limiter import RATE_LIMIT_MESSAGE


def _error_example(status: int, message: str) -> dict[str, Any]:
    return {
        "application/json": {
            "schema": {"$ref": "#/components/schemas/Error"},
            "example": {"message": message, "statusCode": status},
        }
    }


def _task_content() -> dict[str, Any]:
    return {"application/json": {"schema": {"$ref": "#/components/schemas/Task"}}}


_ID_PARAM: dict[str, Any] = {
    "in": "path",
    "name": "id",
    "required": True,
    "schema": {"type": "string"},
    "description": "Identificador da Tarefa",
}

_TITLE_BODY: dict[str, Any] = {
    "required": True,
    "content": {
        "application/json": {
            "schema": {"$ref": "#/components/schemas/TaskWrite"},
        }
    },
}


def build_openapi_spec(title: str, version: str, server_url: str) -> dict[str, Any]:
    not_found = {"description": "Tarefa não encontrada", "content": _error_example(404, TASK_NOT_FOUND_MESSAGE)}
    bad_request = {"description": "Título inválido", "content": _error_example(400, TITLE_RULE_MESSAGE)}
    rate_limited = {"description": "Limite de requisições excedido", "content": _error_example(429, RATE_LIMIT_MESSAGE)}
    schemas: dict[str, Any] = {
        "TaskMeta": {
            "type": "object",
            "required": ["resourceType", "created", "lastModified", "location"],
            "properties": {
                "resourceType": {"type": "string", "enum": ["Task"]},
                "created": {"type": "string", "format": "date-time", "example": "2025-09-08T19:05:00.000Z"},
                "lastModified": {"type": "string", "format": "date-time", "example": "2025-09-08T19:05:00.000Z"},
                "location": {"type": "string", "example": f"{server_url}/tasks/0b6f3c1e-6f0e-4c7a-9d2f-3b8f0c1d2e3f"},
            },
        },
        "Task": {
            "type": "object",
            "required": ["id", "title", "completed", "meta"],
            "properties": {
                "id": {"type": "string", "format": "uuid", "readOnly": True},
                "title": {"type": "string", "minLength": 4},
                "completed": {"type": "boolean", "readOnly": True},
                "meta": {"$ref": "#/components/schemas/TaskMeta"},
            },
        },
        "TaskWrite": {
            "type": "object",
            "required": ["title"],
            "properties": {"title": {"type": "string", "minLength": 4, "example": "Minha tarefa"}},
        },
        "TaskList": {
            "type": "object",
            "required": ["page", "limit", "total", "totalPages", "data"],
            "properties": {
                "page": {"type": "integer"},
                "limit": {"type": "integer", "maximum": MAX_LIMIT},
                "total": {"type": "integer"},
                "totalPages": {"type": "integer"},
                "data": {"type": "array", "items": {"$ref": "#/components/schemas/Task"}},
            },
        },
        "Error": {
            "type": "object",
            "required": ["message", "statusCode"],
            "properties": {"message": {"type": "string"}, "statusCode": {"type": "integer"}},
        },
    }
    paths: dict[str, Any] = {
        "/tasks": {
            "get": {
                "summary": "Lista tarefas com paginação",
                "parameters": [
                    {
                        "in": "query",
                        "name": "page",
                        "schema": {"type": "integer", "default": DEFAULT_PAGE, "minimum": 1},
                        "description": "Número da página",
                    },
                    {
                        "in": "query",
                        "name": "limit",
                        "schema": {"type": "integer", "default": DEFAULT_LIMIT, "minimum": 1, "maximum": MAX_LIMIT},
                        "description": "Quantidade de itens por página",
                    },
                ],
                "responses": {
                    "200": {
                        "description": "Lista de tarefas paginada",
                        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/TaskList"}}},
                    },
                    "429": rate_limited,
                },
            },
            "post": {
                "summary": "Cria uma nova tarefa",
                "requestBody": _TITLE_BODY,
                "responses": {
                    "201": {"description": "Tarefa criada", "content": _task_content()},
                    "400": bad_request,
                    "429": rate_limited,
                },
            },
        },
        "/tasks/{id}": {
            "get": {
                "summary": "Buscar Tarefa por ID",
                "parameters": [_ID_PARAM],
                "responses": {"200": {"description": "Tarefa", "content": _task_content()}, "404": not_found},
            },
            "put": {
                "summary": "Atualiza uma tarefa",
                "parameters": [_ID_PARAM],
                "requestBody": _TITLE_BODY,
                "responses": {
                    "200": {"description": "Tarefa atualizada", "content": _task_content()},
                    "400": bad_request,
                    "404": not_found,
                },
            },
            "delete": {
                "summary": "Remove uma tarefa",
                "parameters": [_ID_PARAM],
                "responses": {"204": {"description": "Tarefa removida"}, "404": not_found},
            },
        },
        "/tasks/{id}/completed": {
            "patch": {
                "summary": "Alterna o campo completed de uma tarefa",
                "parameters": [_ID_PARAM],
                "responses": {"200": {"description": "Tarefa atualizada", "content": _task_content()}, "404": not_found},
            }
        },
        "/health": {
            "get": {
                "summary": "Estado do serviço",
                "responses": {"200": {"description": "Serviço ativo"}},
            }
        },
    }
    return {
        "openapi": "3.0.3",
        "info": {
            "title": title,
            "version": version,
            "description": "API simples de lista de tarefas",
        },
        "servers": [{"url": server_url}],
        "paths": paths,
        "components": {"schemas": schemas},
    }


__all__ = ["build_openapi_spec"]

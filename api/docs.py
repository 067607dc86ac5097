"""
API文档接口
"""

from flask import Blueprint, jsonify, request

docs_bp = Blueprint('docs', __name__)

TASK_SCHEMA = {
    "id": "integer, assigned by the server",
    "description": "string, non-empty",
    "isCompleted": "boolean, false on creation",
    "createdAt": "ISO-8601 UTC timestamp, set on creation"
}


@docs_bp.route('', methods=['GET'])
def api_docs():
    """API文档"""
    docs = {
        "title": "Task Manager API Documentation",
        "version": "1.0.0",
        "description": "RESTful API for a minimal in-memory task list",
        "base_url": request.host_url.rstrip('/') + "/api",
        "schemas": {
            "Task": TASK_SCHEMA,
            "Error": {
                "success": "false",
                "error": {
                    "message": "Human readable message",
                    "status_code": "HTTP status code",
                    "code": "VALIDATION_ERROR | TASK_NOT_FOUND | INVALID_JSON",
                    "timestamp": "ISO-8601 timestamp",
                    "path": "Request path"
                }
            }
        },
        "endpoints": {
            "tasks": {
                "list": {
                    "method": "GET",
                    "url": "/api/tasks",
                    "description": "Get all tasks ordered by ascending id",
                    "responses": {"200": "Array of Task"}
                },
                "create": {
                    "method": "POST",
                    "url": "/api/tasks",
                    "description": "Create a new task",
                    "body": {
                        "description": "Task description (required, not blank)"
                    },
                    "responses": {"201": "Created Task", "400": "Blank description"}
                },
                "get": {
                    "method": "GET",
                    "url": "/api/tasks/{id}",
                    "description": "Get task by ID",
                    "responses": {"200": "Task", "404": "Task not found"}
                },
                "update": {
                    "method": "PUT",
                    "url": "/api/tasks/{id}",
                    "description": "Update task completion status",
                    "body": {
                        "isCompleted": "Completion flag (required, boolean)"
                    },
                    "responses": {"200": "Updated Task", "404": "Task not found"}
                },
                "delete": {
                    "method": "DELETE",
                    "url": "/api/tasks/{id}",
                    "description": "Delete task",
                    "responses": {"204": "No content", "404": "Task not found"}
                }
            },
            "service": {
                "index": {"method": "GET", "url": "/"},
                "health": {"method": "GET", "url": "/health"}
            }
        }
    }

    return jsonify(docs)

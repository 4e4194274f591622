"""Tool definition implementations."""
from .http import HttpToolDefinition, http_tool, json_param, page_params, text_param

__all__ = ["HttpToolDefinition", "http_tool", "json_param", "page_params", "text_param"]

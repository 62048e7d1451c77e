"""JSON tool adapter for the styling engine.

Exposes the engine as four named tools with JSON input schemas, for hosts that
drive tools with JSON arguments. Every call returns an envelope of the form::

    {"content": [{"type": "text", "text": "<json payload>"}], "isError": false}

Request errors never escape :meth:`ToolAdapter.call_tool`; they are reported
as ``{"error": true, "message": ...}`` payloads with ``isError`` set.
"""

import json
from typing import Any, Callable, Dict, List, Mapping, Optional

from glyphforge.api.engine import TextStyler
from glyphforge.api.validation import RequestValidator
from glyphforge.shared import GlyphForgeError, RequestValidationError, get_logger
from glyphforge.styles import style_names

INTENSITY_NAMES = ["mini", "normal", "maxi"]


def _tool_definitions() -> List[Dict[str, Any]]:
    names = list(style_names())
    return [
        {
            "name": "transform_text",
            "description": (
                "Transform text into a specific Unicode style. Available styles: "
                + ", ".join(names)
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "text": {"type": "string", "description": "The text to transform"},
                    "style": {
                        "type": "string",
                        "description": "The style to apply",
                        "enum": names,
                    },
                    "zalgoIntensity": {
                        "type": "string",
                        "description": "Intensity for zalgo style (mini, normal, maxi)",
                        "enum": INTENSITY_NAMES,
                    },
                },
                "required": ["text", "style"],
            },
        },
        {
            "name": "transform_all",
            "description": "Transform text into all available styles at once",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "text": {"type": "string", "description": "The text to transform"},
                },
                "required": ["text"],
            },
        },
        {
            "name": "list_styles",
            "description": "List all available text transformation styles with examples",
            "inputSchema": {"type": "object", "properties": {}},
        },
        {
            "name": "batch_transform",
            "description": "Transform multiple texts with multiple styles",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "items": {
                        "type": "array",
                        "description": "Array of transformation requests",
                        "items": {
                            "type": "object",
                            "properties": {
                                "text": {"type": "string"},
                                "style": {"type": "string", "enum": names},
                                "zalgoIntensity": {
                                    "type": "string",
                                    "enum": INTENSITY_NAMES,
                                },
                            },
                            "required": ["text", "style"],
                        },
                    },
                },
                "required": ["items"],
            },
        },
    ]


TOOL_DEFINITIONS: List[Dict[str, Any]] = _tool_definitions()


def _envelope(payload: Dict[str, Any], is_error: bool = False, indent: Optional[int] = 2) -> Dict[str, Any]:
    return {
        "content": [
            {
                "type": "text",
                "text": json.dumps(payload, indent=indent, ensure_ascii=False),
            }
        ],
        "isError": is_error,
    }


class ToolAdapter:
    """Dispatches tool calls to a :class:`TextStyler`.

    Examples:
        >>> adapter = ToolAdapter()
        >>> response = adapter.call_tool("transform_text", {"text": "AB", "style": "bold"})
        >>> response["isError"]
        False
    """

    def __init__(
        self,
        styler: Optional[TextStyler] = None,
        validator: Optional[RequestValidator] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        self.styler = styler or TextStyler(correlation_id=correlation_id)
        self.tracking = self.styler.config.global_.enable_correlation_tracking
        if not self.tracking:
            correlation_id = None
        self.validator = validator or RequestValidator(
            self.styler.config.limits, correlation_id
        )
        self.logger = get_logger(__name__, correlation_id, "tool_adapter")

        self._handlers: Dict[str, Callable[[Mapping[str, Any]], Dict[str, Any]]] = {
            "transform_text": self._transform_text,
            "transform_all": self._transform_all,
            "list_styles": self._list_styles,
            "batch_transform": self._batch_transform,
        }

    def list_tools(self) -> List[Dict[str, Any]]:
        """Tool definitions with their JSON input schemas."""
        return TOOL_DEFINITIONS

    def _transform_text(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        request = self.validator.validate_transform(
            arguments.get("text"),
            arguments.get("style"),
            arguments.get("zalgoIntensity"),
        )
        transformed = self.styler.transform(request.text, request.style, request.options)
        return {
            "original": request.text,
            "style": request.style.value,
            "transformed": transformed,
        }

    def _transform_all(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        text = self.validator.validate_transform_all(arguments.get("text"))
        return {"original": text, "transformations": self.styler.transform_all(text)}

    def _list_styles(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        styles = self.styler.list_styles()
        return {
            "totalStyles": len(styles),
            "styles": [info.to_dict() for info in styles],
        }

    def _batch_transform(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        items = self.validator.validate_batch(arguments.get("items"))
        return self.styler.batch_transform(items).to_dict()

    def call_tool(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]] = None,
        correlation_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Run a tool and wrap its payload in a response envelope.

        Args:
            name: Tool name from :data:`TOOL_DEFINITIONS`
            arguments: JSON arguments for the tool
            correlation_id: Request ID for this call's log records; defaults
                to the adapter's own

        Returns:
            Envelope with the JSON payload; ``isError`` is set on failure
        """
        logger = self.logger
        if correlation_id is not None and self.tracking:
            logger = logger.with_correlation_id(correlation_id)

        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise RequestValidationError(
                    f"Unknown tool: {name}",
                    field_name="name",
                    suggestions=list(self._handlers),
                )
            if arguments is not None and not isinstance(arguments, Mapping):
                raise RequestValidationError(
                    "Tool arguments must be an object", field_name="arguments"
                )
            payload = handler(arguments or {})
            logger.debug("Tool call succeeded", extra={"tool": name})
            return _envelope(payload)

        except (GlyphForgeError, ValueError, TypeError) as e:
            logger.info(
                "Tool call failed",
                extra={"tool": name, "error": str(e)},
            )
            return _envelope({"error": True, "message": str(e)}, is_error=True, indent=None)


_default_adapter: Optional[ToolAdapter] = None


def call_tool(
    name: str,
    arguments: Optional[Mapping[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Run a tool with a shared default adapter."""
    global _default_adapter
    if _default_adapter is None:
        _default_adapter = ToolAdapter()
    return _default_adapter.call_tool(name, arguments, correlation_id)


def list_tools() -> List[Dict[str, Any]]:
    """Tool definitions with their JSON input schemas."""
    return TOOL_DEFINITIONS

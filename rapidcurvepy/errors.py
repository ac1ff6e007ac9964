from typing import Any, Dict, Optional


class InvalidParameterError(ValueError):
    """Raised when a curve is constructed with a non-positive geometric parameter."""

    def __init__(
        self,
        message: str,
        curve_kind: Optional[str] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.curve_kind = curve_kind
        self.parameters = dict(parameters) if parameters else {}

class CivcalError(Exception):
    """Base error."""

class ParseError(CivcalError, ValueError):
    """Raised when text does not match a date layout."""

    def __init__(self, text: str, layout: str, reason: str = "") -> None:
        self.text = text
        self.layout = layout
        self.reason = reason
        msg = f"cannot parse {text!r} as {layout!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)

class ConstructionError(CivcalError, ValueError):
    """Raised for calendar fields or day counts outside the representable range."""

class ScanLimitError(CivcalError):
    """Raised when a bounded backward/forward scan runs out of steps."""

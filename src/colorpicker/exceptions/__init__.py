"""
Custom exception hierarchy for the color picker.

## Exception Hierarchy

```
ColorPickerError (base)
├── ColorParseError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions carry `user_message`, `technical_message`,
`recoverable` and `recovery_hint`.

Edits inside the picker (typed text, pointer drags) never raise: bad input
falls back or is clamped. These exceptions cover the outer surfaces, such as
config files and colors passed on the command line.

### Example: Color from the command line

```python
from colorpicker.exceptions import ColorParseError

raise ColorParseError("#12345")
# User sees: "Could not read color '#12345': not a hex or r,g,b color"
```

See `colorpicker.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import ColorPickerError
from .color import ColorParseError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)

__all__ = [
    # Base
    "ColorPickerError",
    # Color
    "ColorParseError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "handle_errors",
    "wrap_pydantic_error",
]

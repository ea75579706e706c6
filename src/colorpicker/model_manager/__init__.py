"""Generic helpers for Pydantic-backed state.

- **ObserverManager**: Generic observer pattern implementation
- **PydanticPersistence**: Utility for loading/saving Pydantic models to JSON
"""

from colorpicker.model_manager.observer import ObserverManager
from colorpicker.model_manager.persistence import PydanticPersistence

__all__ = [
    "ObserverManager",
    "PydanticPersistence",
]

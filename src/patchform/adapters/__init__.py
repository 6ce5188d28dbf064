"""Form adapters: copy-with-update strategies for form values.

Patches never assign to the form they receive. They ask an adapter for a
new value with the changed fields instead.
"""

from __future__ import annotations

from patchform.adapters.base import BaseFormAdapter
from patchform.adapters.builtin import (
    DataclassFormAdapter,
    MappingFormAdapter,
    PydanticFormAdapter,
)
from patchform.adapters.factory import FormAdapterFactory

__all__ = [
    "BaseFormAdapter",
    "DataclassFormAdapter",
    "FormAdapterFactory",
    "MappingFormAdapter",
    "PydanticFormAdapter",
]

from __future__ import annotations

import logging
from typing import Any, ClassVar

from patchform.core.errors import PatchformError
from patchform.core.factory import PluginFactory
from patchform.protocols import FormAdapterProtocol

logger = logging.getLogger(__name__)


class FormAdapterFactory(PluginFactory[FormAdapterProtocol]):
    """Factory and registry for form adapters.

    Adapters are probed in registration order by ``for_form``; the defaults
    are registered as pydantic, dataclass, mapping.

    Example:
        >>> adapter = FormAdapterFactory.create("mapping")
        >>> adapter = FormAdapterFactory.for_form({"first_name": ""})

        # Register a custom adapter for attrs classes
        >>> FormAdapterFactory.register("attrs", AttrsFormAdapter)
    """

    _registry: ClassVar[dict[str, type[FormAdapterProtocol]]] = {}
    _default_type: ClassVar[str] = "mapping"
    _entity_name: ClassVar[str] = "form adapter"
    _defaults_registered: ClassVar[bool] = False

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default adapters are registered."""
        if cls._defaults_registered:
            return
        from patchform.adapters.builtin import (
            DataclassFormAdapter,
            MappingFormAdapter,
            PydanticFormAdapter,
        )

        cls._registry["pydantic"] = PydanticFormAdapter
        cls._registry["dataclass"] = DataclassFormAdapter
        cls._registry["mapping"] = MappingFormAdapter
        cls._defaults_registered = True

    @classmethod
    def for_form(cls, form: Any) -> FormAdapterProtocol:
        """Find the first registered adapter that supports ``form``.

        Args:
            form: The form a patch is about to copy.

        Returns:
            Adapter instance.

        Raises:
            PatchformError: If no registered adapter supports the form type.
        """
        cls._ensure_defaults_registered()
        for impl_class in cls._registry.values():
            adapter = impl_class()
            if adapter.supports(form):
                return adapter

        logger.warning("No form adapter supports %s", type(form).__name__)
        raise PatchformError(
            "unsupported_form",
            "No form adapter supports {form_type}. Available adapters: {available}",
            {"form_type": type(form).__name__, "available": ", ".join(cls._registry)},
        )

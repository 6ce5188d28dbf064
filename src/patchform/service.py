"""Form validation service.

``FormValidator`` wraps an assembled pipeline with batch helpers and run
statistics, the way an application typically holds one validator per form.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from patchform.core.pipeline import Pipeline, run
from patchform.core.result import Failure, Success

logger = logging.getLogger(__name__)

F = TypeVar("F")
V = TypeVar("V")


class FormValidator(Generic[F, V]):
    """Runs a pipeline and keeps simple statistics.

    Example:
        >>> validator = FormValidator(name_pipeline, name="signup")
        >>> result = validator.validate(NameForm(first_name="", last_name="Doe"))
        >>> if not result:
        ...     render(result.error)  # the annotated form
        >>> validator.stats
        {'run_count': 1, 'failure_count': 1}
    """

    def __init__(self, pipeline: Pipeline[F, V], name: str = "form") -> None:
        """Initialize the validator.

        Args:
            pipeline: Pipeline built with ``validate``/``verify``/``keep`` or
                ``FormValidatorBuilder``.
            name: Name used in log messages.
        """
        self._pipeline = pipeline
        self._name = name
        self._run_count = 0
        self._failure_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def pipeline(self) -> Pipeline[F, V]:
        return self._pipeline

    def validate(self, form: F) -> Success[V] | Failure[F]:
        """Run the pipeline on one form.

        Returns:
            ``Success(verified)`` or ``Failure(annotated_form)``.
        """
        self._run_count += 1
        result = run(self._pipeline, form)
        if isinstance(result, Failure):
            self._failure_count += 1
        return result

    def validate_batch(self, forms: Iterable[F]) -> list[Success[V] | Failure[F]]:
        """Run the pipeline on each form, in order."""
        results = [self.validate(form) for form in forms]
        failures = sum(1 for r in results if isinstance(r, Failure))
        logger.debug(
            "Validated %d %s form(s): %d failed",
            len(results),
            self._name,
            failures,
        )
        return results

    def is_valid(self, form: F) -> bool:
        """Check a form without keeping its result."""
        return bool(self.validate(form))

    @property
    def stats(self) -> dict[str, Any]:
        """Run statistics: ``run_count`` and ``failure_count``."""
        return {
            "run_count": self._run_count,
            "failure_count": self._failure_count,
        }

    def reset_stats(self) -> None:
        """Reset run statistics."""
        self._run_count = 0
        self._failure_count = 0

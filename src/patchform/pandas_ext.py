from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from patchform.core.pipeline import Pipeline, run
from patchform.core.result import Success

if TYPE_CHECKING:
    import pandas as pd


def _to_row(value: Any) -> dict[str, Any]:
    """Flatten a verified value or annotated form into one DataFrame row."""
    if isinstance(value, BaseModel):
        return value.model_dump()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if hasattr(value, "_asdict"):
        return dict(value._asdict())
    if isinstance(value, Mapping):
        return dict(value)
    return {"value": value}


def validate_records(
    df: pd.DataFrame,
    pipeline: Pipeline[Any, Any],
    *,
    valid_column: str = "is_valid",
    na_as_none: bool = True,
) -> pd.DataFrame:
    """Run a pipeline over every row of a DataFrame.

    Each row is passed to the pipeline as a ``dict`` form, so accessors
    should read keys (``field_accessor`` does). Valid rows are replaced by
    their verified value; invalid rows by the annotated row, which carries
    whatever error columns the patches added.

    Args:
        df: Input DataFrame, one form per row.
        pipeline: Pipeline to run.
        valid_column: Name of the added boolean column.
        na_as_none: If True, missing values (NaN, NaT, None) reach the
            pipeline as ``None``.

    Returns:
        DataFrame with the same index as ``df``.
    """
    import pandas as pd

    frame = df.astype(object).where(pd.notna(df), None) if na_as_none else df

    rows = []
    for record in frame.to_dict(orient="records"):
        result = run(pipeline, record)
        value = result.value if isinstance(result, Success) else result.error
        row = _to_row(value)
        row[valid_column] = result.is_valid
        rows.append(row)

    return pd.DataFrame(rows, index=df.index)


class FormsAccessor:
    """Pandas accessor for running form pipelines.

    Usage:
        >>> from patchform.pandas_ext import register_accessor
        >>> register_accessor()
        >>> df = pd.DataFrame({"first_name": ["John", ""], "last_name": ["Doe", ""]})
        >>> df.forms.validate(pipeline)
    """

    def __init__(self, pandas_obj: pd.DataFrame) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The pandas DataFrame this accessor is attached to.
        """
        self._obj = pandas_obj

    def validate(self, pipeline: Pipeline[Any, Any], **kwargs: Any) -> pd.DataFrame:
        """Run ``pipeline`` over every row. See ``validate_records``."""
        return validate_records(self._obj, pipeline, **kwargs)

    def invalid(self, pipeline: Pipeline[Any, Any], **kwargs: Any) -> pd.DataFrame:
        """Only the annotated rows that failed validation."""
        valid_column = kwargs.get("valid_column", "is_valid")
        result = validate_records(self._obj, pipeline, **kwargs)
        if result.empty:
            return result
        return result[~result[valid_column].astype(bool)]


def register_accessor(name: str = "forms") -> None:
    """Register the forms accessor on pandas DataFrames.

    After calling this, you can use:
        >>> df.forms.validate(pipeline)

    Args:
        name: Name for the accessor (default: "forms").
    """
    import pandas as pd

    if not hasattr(pd.DataFrame, name):
        pd.api.extensions.register_dataframe_accessor(name)(FormsAccessor)

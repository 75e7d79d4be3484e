from typing import Any

from pydantic import ValidationError

from tourism_catalog.exceptions.custom import FilterError
from tourism_catalog.schemas.filters import FilterState

DEFAULT_FILTERS = FilterState()

# Accept both python names and the camelCase wire names
_FIELD_NAMES: dict[str, str] = {}
for _name, _info in FilterState.model_fields.items():
    _FIELD_NAMES[_name] = _name
    if _info.alias:
        _FIELD_NAMES[_info.alias] = _name


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    return first.get("msg", str(exc))


def update_filter(state: FilterState, key: str, value: Any) -> FilterState:
    """Return a copy of `state` with only `key` replaced.

    The returned object is always fully populated and re-validated.
    """
    field = _FIELD_NAMES.get(key)
    if field is None:
        raise FilterError(f"Unknown filter {key!r}")

    values = state.model_dump()
    values[field] = value
    try:
        return FilterState.model_validate(values)
    except ValidationError as exc:
        raise FilterError(f"Invalid value for {key!r}: {_describe(exc)}") from exc


def clear_filters() -> FilterState:
    return DEFAULT_FILTERS


def build_filters(**values: Any) -> FilterState:
    """Build a FilterState from optional values, skipping the ones left as None."""
    provided = {k: v for k, v in values.items() if v is not None}
    state = DEFAULT_FILTERS
    for key, value in provided.items():
        state = update_filter(state, key, value)
    return state

#!/usr/bin/env python3
# CUI // SP-CTI
"""BLE Readiness: Validation Result Loader.

Parses raw JSON (as produced by the upstream validation pipeline) into a
typed BLEValidationResult. Shape violations raise
InvalidValidationResultError naming every offending field.

Usage:
    from ble_readiness.loader import load_validation_result_file

    result = load_validation_result_file("validation-result.json")
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Union

from pydantic import ValidationError

from ble_readiness.errors import InvalidValidationResultError
from ble_readiness.models import BLEValidationResult

logger = logging.getLogger("ble_readiness.loader")


def _error_locations(exc: ValidationError) -> List[str]:
    return [".".join(str(part) for part in err["loc"]) for err in exc.errors()]


def load_validation_result(data: Union[Mapping[str, Any], BLEValidationResult]) -> BLEValidationResult:
    """Validate a raw mapping into a BLEValidationResult.

    Raises:
        InvalidValidationResultError: the mapping violates the result shape.
    """
    if isinstance(data, BLEValidationResult):
        return data
    try:
        return BLEValidationResult.model_validate(data)
    except ValidationError as exc:
        locations = _error_locations(exc)
        logger.warning("Rejected validation result: %d invalid field(s)", len(locations))
        raise InvalidValidationResultError(
            f"Malformed validation result ({exc.error_count()} error(s)): "
            f"{', '.join(locations)}",
            locations=locations,
        ) from exc


def load_validation_result_file(path: Union[str, Path]) -> BLEValidationResult:
    """Read and validate a JSON validation result from disk."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise InvalidValidationResultError(f"{path} is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise InvalidValidationResultError(f"Cannot read {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidValidationResultError(f"{path} must contain a JSON object")
    return load_validation_result(data)

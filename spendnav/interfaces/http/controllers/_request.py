# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TypeVar

from flask import request
from pydantic import BaseModel, ValidationError

from spendnav.shared.errors.validation import raise_validation_error

DTO = TypeVar("DTO", bound=BaseModel)


def parse_body(dto_type: type[DTO]) -> DTO:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    try:
        return dto_type.model_validate(payload)
    except ValidationError as exc:
        raise_validation_error(exc)

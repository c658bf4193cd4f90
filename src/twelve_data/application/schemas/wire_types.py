# src/twelve_data/application/schemas/wire_types.py
# Copyright (c) Twelve Data Client.
# SPDX-License-Identifier: MIT
"""Pydantic field types bound to the Twelve Data field codecs.

Purpose:
    ``Annotated`` aliases that run the domain codecs before pydantic's own
    validation, so response models can declare ``open: NumericString`` and
    stay flat.

Layer:
    application/schemas
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BeforeValidator

from twelve_data.domain.codecs import (
    PriceRange,
    decode_datetime,
    decode_numeric_string,
    decode_range,
)

TwelveDataDatetime = Annotated[datetime, BeforeValidator(decode_datetime)]
NumericString = Annotated[float, BeforeValidator(decode_numeric_string)]
PriceRangeField = Annotated[PriceRange, BeforeValidator(decode_range)]

__all__ = ["NumericString", "PriceRangeField", "TwelveDataDatetime"]

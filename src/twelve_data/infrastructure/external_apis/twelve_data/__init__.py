# Copyright (c) Twelve Data Client.
# SPDX-License-Identifier: MIT
"""Twelve Data external API package.

Purpose:
    Group Twelve Data infrastructure modules:

    * settings: Pydantic settings for the client.
    * client: Typed dispatcher over a pluggable HTTP transport.
"""

from __future__ import annotations

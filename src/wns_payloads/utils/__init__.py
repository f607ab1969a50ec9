# -*- coding: utf-8 -*-
"""Utility modules."""

from wns_payloads.utils.validation import is_channel_uri, mask_channel_uri

__all__ = ["is_channel_uri", "mask_channel_uri"]

"""Command-line interface for contentsync."""

from __future__ import annotations

import logging as logging

from contentsync import DeltaSession as DeltaSession
from contentsync import load_config as load_config
from contentsync import load_delta as load_delta
from contentsync.cli.app import main as main
from contentsync.cli.commands import apply as apply_command
from contentsync.cli.commands import token as token_command
from contentsync.cli.common import build_manager as build_manager
from contentsync.cli.parser import build_parser as build_parser

_format_apply_summary = apply_command.format_apply_summary
_run_apply = apply_command.run_apply
_run_token = token_command.run_token

__all__ = ["build_manager", "build_parser", "main"]

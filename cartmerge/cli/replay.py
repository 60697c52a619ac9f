# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Cartmerge Contributors
#
# This file is part of Cartmerge.
#
# Cartmerge is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Cartmerge is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from cartmerge._version import __version__
from cartmerge.cli.exitcodes import exit_code_from_report_dict
from cartmerge.core.config import CartmergeConfig, DefaultConfigLoader, OrderConfig, find_config_file
from cartmerge.order.aggregate import Order
from cartmerge.order.errors import IncorrectItemError
from cartmerge.order.loader import DefaultItemsLoader
from cartmerge.order.types import Item
from cartmerge.reporting.renderers.json import JsonReportRenderer
from cartmerge.reporting.renderers.text import TextReportRenderer
from cartmerge.reporting.types import OrderReport, Rejection

logger = logging.getLogger(__name__)


def replay_items(
    items: Iterable[Item],
    *,
    config: OrderConfig | None = None,
    keep_going: bool = False,
    tool_version: str | None = None,
) -> OrderReport:
    """
    Add ``items`` to a fresh Order one by one and report the result.

    Without ``keep_going`` the first rejected item stops the replay.
    """
    order = Order(config)
    rejections: list[Rejection] = []
    processed = 0
    stopped_early = False

    for pos, item in enumerate(items, start=1):
        processed += 1
        try:
            order.add_item(item)
        except IncorrectItemError as e:
            rejections.append(Rejection(position=pos, code=e.code, message=e.message))
            if not keep_going:
                stopped_early = True
                break

    return OrderReport.build(
        items=order.get_items(),
        lines_processed=processed,
        rejections=rejections,
        stopped_early=stopped_early,
        tool_version=tool_version or __version__,
    )


def load_config(path: str, config: str | None) -> CartmergeConfig:
    """Explicit --config wins; otherwise look next to the items file."""
    if config is not None:
        return DefaultConfigLoader().load(Path(config))

    found = find_config_file(Path(path).resolve().parent)
    if found is None:
        return CartmergeConfig()
    return DefaultConfigLoader().load(found)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=logging.getLevelName(level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(
    *,
    path: str,
    config: str | None,
    fmt: str,
    keep_going: bool,
    verbosity: str = "normal",
    log_level: str | None = None,
    tool_version: str | None = None,
) -> int:
    cfg = load_config(path, config)
    configure_logging(log_level or cfg.log_level)
    if cfg.source is not None:
        logger.info("Using config %s", cfg.source)

    items = DefaultItemsLoader().load(Path(path))
    logger.info("Replaying %d item lines from %s", len(items), path)

    report = replay_items(items, config=cfg.order, keep_going=keep_going, tool_version=tool_version)

    if fmt == "json":
        out = JsonReportRenderer().render(report)
    else:
        out = TextReportRenderer(verbosity=verbosity).render(report)  # type: ignore[arg-type]
    print(out, end="")

    return exit_code_from_report_dict(report.to_dict())

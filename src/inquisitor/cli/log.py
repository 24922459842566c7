"""CLI command: inquisitor log -- stream stdin above a live bottom bar."""

from __future__ import annotations

from dataclasses import replace

import click

from inquisitor.config import UIConfig
from inquisitor.ui.bottom_bar import BottomBar


@click.command()
@click.option("--status", default="Streaming", help="Text shown in the bottom bar")
@click.option("--no-color", is_flag=True, help="Disable colored output")
def log(status: str, no_color: bool) -> None:
    """Copy stdin to stdout while a status bar stays pinned underneath."""
    config = UIConfig.from_env()
    if no_color:
        config = replace(config, color=False)
    stdin = click.get_text_stream("stdin")
    bar = BottomBar(config=config)

    def status_line(count: int) -> str:
        counter = f"({count} line{'s' if count != 1 else ''})"
        return f"{bar.style(status, bold=True)} {bar.style(counter, dim=True)}"

    bar.update_bottom_bar(status_line(0))
    count = 0
    try:
        for line in stdin:
            count += 1
            bar.write_log(line)
            bar.update_bottom_bar(status_line(count))
    finally:
        bar.close()

"""
CLI 入口模块 - 使用 Typer 构建命令行界面

渲染流程：
1. 读取测量结果
2. 选择报告器（JSON 或终端）
3. 输出报告并设置退出码
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from size_report.loader import load_report
from size_report.models import Plugins
from size_report.reporters import create_reporter
from size_report.sink import StreamSink

logger = logging.getLogger(__name__)

# 创建 Typer 应用实例
app = typer.Typer(
    name="size-report",
    help="size-report: Show Size Limit check results in the terminal or as JSON.",
    add_completion=False,
)

# Rich Console 用于输出
console = Console()


@app.command()
def render(
    results: Path = typer.Argument(
        ...,
        help="JSON file with the measured check results",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print results as JSON",
    ),
    plugins: list[str] = typer.Option(
        [],
        "--plugin",
        "-p",
        help="Active measurement plugin (webpack, gzip, time). Repeat for several.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config-path",
        "-c",
        help="File with the limits, shown in the fix hint",
    ),
    color: Optional[bool] = typer.Option(
        None,
        "--color/--no-color",
        help="Force colors on or off (default: detect terminal)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logs",
    ),
) -> None:
    """
    Render check results.

    Examples:
        size-report render results.json
        size-report render results.json --plugin webpack
        size-report render results.json --json
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    reporter = create_reporter(StreamSink(), json_output, color=color)

    try:
        config = load_report(results, config_path)
        logger.debug("Rendering %d checks with plugins %s", len(config.checks), plugins)
        reporter.report_results(Plugins(plugins), config)
    except Exception as e:
        logger.debug("Rendering failed: %r", e)
        reporter.report_error(e)
        raise typer.Exit(1)

    # 设置退出码
    if config.failed:
        raise typer.Exit(1)
    raise typer.Exit(0)


@app.command()
def version() -> None:
    """Show the version of size-report."""
    from size_report import __version__
    console.print(f"[bold]size-report[/bold] v{__version__}")


if __name__ == "__main__":
    app()

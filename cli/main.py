"""
Command Line Interface using Fire - run kitchen scenarios from the shell
"""
import fire
import logging
import sys
from pathlib import Path
from typing import List, Optional

from config import Settings, load_settings
from brigade_types import ExportFormat
from kitchen.manager import StationManager
from kitchen.trace import render_trace
from metrics.collector import MetricsCollector
from scenarios.loader import build_manager, load_scenario

logger = logging.getLogger(__name__)

__version__ = "1.0.0"


def configure_logging(settings: Settings):
    """Configure root logging from settings"""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


class BrigadeCLI:
    """Command-line interface for Brigade station fulfillment"""

    def __init__(self, config_path: str = "configs/config.yaml"):
        """Initialize CLI with configuration"""
        self.config_path = Path(config_path)
        self.config: Settings = load_settings(self.config_path)
        configure_logging(self.config)

    def _load(self, scenario: str) -> StationManager:
        return build_manager(load_scenario(scenario), self.config.kitchen)

    def run(self, scenario: str, passes: int = 1, export: bool = False,
            output_dir: str = "", export_format: str = "") -> None:
        """Process a scenario's order queue

        Args:
            scenario: Path to a scenario YAML file
            passes: Number of fulfillment passes over the queue
            export: Write events, outcomes and summary files
            output_dir: Override the configured metrics directory
            export_format: csv or json (defaults to configuration)
        """
        manager = self._load(scenario)
        collector = MetricsCollector(self.config.metrics)
        lines: List[str] = []

        for number in range(1, max(1, passes) + 1):
            report = manager.process_all_dishes()
            collector.record(report, label=f"pass-{number}")
            lines.extend(render_trace(report, verbose=self.config.kitchen.verbose_trace))
            if not manager.queue:
                break

        for line in lines:
            print(line)

        summary = collector.summarize()
        print(f"\nPrepared {summary['fulfilled']} of {summary['orders']} order attempts")
        if manager.queue:
            print("Still queued:")
            print(manager.display_dish_queue())

        if export:
            written = collector.export(
                Path(output_dir) if output_dir else None,
                ExportFormat(export_format.lower()) if export_format else None
            )
            for path in written:
                print(f"Wrote {path}")

    def stations(self, scenario: str) -> None:
        """Show stations in fallback order with their dishes and stock"""
        manager = self._load(scenario)
        for index, station in enumerate(manager.registry):
            dishes = ", ".join(dish.name for dish in station.dishes) or "-"
            print(f"{index}. {station.name} [{dishes}]")
            print(station.display_stock())

    def queue(self, scenario: str) -> None:
        """Show the initial order queue and backup stock"""
        manager = self._load(scenario)
        print("Order queue:")
        print(manager.display_dish_queue())
        print("\nBackup ingredients:")
        for ingredient in manager.backup_ingredients:
            print(f"  {ingredient.name}: {ingredient.quantity}")

    def version(self) -> None:
        """Show version information"""
        print("Brigade Kitchen Station Fulfillment")
        print(f"Version: {__version__}")


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point"""
    argv = list(sys.argv[1:] if argv is None else argv)

    if argv and argv[0].endswith('.yaml'):
        config_path = argv.pop(0)
    else:
        config_path = "configs/config.yaml"

    try:
        cli = BrigadeCLI(config_path)
        fire.Fire(cli, command=argv)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

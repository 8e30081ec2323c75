"""
Metrics Collector for Brigade
Collects fulfillment reports and summarises them with pandas
"""

import json
import pandas as pd
from typing import Dict, List, Optional, Any
from pathlib import Path
from datetime import datetime
import logging

from brigade_types import EventKind, ExportFormat, OrderStatus
from config import MetricsConfig, get_settings
from kitchen.engine import FulfillmentReport

logger = logging.getLogger(__name__)

EVENT_COLUMNS = ["run", "seq", "kind", "dish", "order_id", "station", "ingredient", "quantity"]
OUTCOME_COLUMNS = ["run", "order_id", "dish", "status", "station", "stations_tried"]


class MetricsCollector:
    """Collect and analyse fulfillment pass metrics"""

    def __init__(self, settings: Optional[MetricsConfig] = None):
        self.settings = settings or get_settings().metrics
        self.reports: List[Dict[str, Any]] = []

    def record(self, report: FulfillmentReport, label: Optional[str] = None):
        """Record one fulfillment pass"""
        run = label or f"run-{len(self.reports) + 1}"
        self.reports.append({"run": run, "report": report})
        logger.info(f"Recorded {run}: {len(report.fulfilled)}/{len(report.outcomes)} orders prepared")

    def events_frame(self) -> pd.DataFrame:
        rows = []
        for entry in self.reports:
            for seq, event in enumerate(entry["report"].events):
                rows.append({"run": entry["run"], "seq": seq, **event.to_dict()})
        return pd.DataFrame(rows, columns=EVENT_COLUMNS)

    def outcomes_frame(self) -> pd.DataFrame:
        rows = []
        for entry in self.reports:
            for outcome in entry["report"].outcomes:
                row = outcome.to_dict()
                row["stations_tried"] = ",".join(row["stations_tried"])
                rows.append({"run": entry["run"], **row})
        return pd.DataFrame(rows, columns=OUTCOME_COLUMNS)

    def summarize(self) -> Dict[str, Any]:
        """Totals across every recorded pass"""
        events = self.events_frame()
        outcomes = self.outcomes_frame()

        fulfilled = int((outcomes["status"] == OrderStatus.FULFILLED.value).sum())
        total = len(outcomes)

        prepared = events[events["kind"] == EventKind.PREPARED.value]
        withdrawn = events[events["kind"] == EventKind.INGREDIENT_WITHDRAWN.value]
        returned = events[events["kind"] == EventKind.REPLENISH_ROLLED_BACK.value]
        failed = events[events["kind"] == EventKind.REPLENISH_FAILED.value]

        withdrawn_by_ingredient = withdrawn.groupby("ingredient")["quantity"].sum()
        returned_by_ingredient = returned.groupby("ingredient")["quantity"].sum()
        net_withdrawn = withdrawn_by_ingredient.sub(returned_by_ingredient, fill_value=0)

        return {
            "runs": len(self.reports),
            "orders": total,
            "fulfilled": fulfilled,
            "requeued": total - fulfilled,
            "fulfillment_rate": fulfilled / total if total else 0.0,
            "prepared_by_station": {k: int(v) for k, v in prepared.groupby("station").size().items()},
            "replenish_failures_by_station": {k: int(v) for k, v in failed.groupby("station").size().items()},
            "backup_withdrawn_by_ingredient": {k: int(v) for k, v in net_withdrawn.items()}
        }

    def export(self, output_dir: Optional[Path] = None,
               export_format: Optional[ExportFormat] = None) -> List[Path]:
        """Write events, outcomes and the summary to disk"""
        output_dir = Path(output_dir or self.settings.output_dir)
        export_format = export_format or self.settings.export_format
        output_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        events = self.events_frame()
        outcomes = self.outcomes_frame()
        written = []

        if export_format == ExportFormat.CSV:
            events_path = output_dir / f"events_{timestamp}.csv"
            outcomes_path = output_dir / f"outcomes_{timestamp}.csv"
            events.to_csv(events_path, index=False)
            outcomes.to_csv(outcomes_path, index=False)
        else:
            events_path = output_dir / f"events_{timestamp}.json"
            outcomes_path = output_dir / f"outcomes_{timestamp}.json"
            events.to_json(events_path, orient="records", indent=2)
            outcomes.to_json(outcomes_path, orient="records", indent=2)
        written.extend([events_path, outcomes_path])

        summary_path = output_dir / f"summary_{timestamp}.json"
        with open(summary_path, 'w') as f:
            json.dump(self.summarize(), f, indent=2, default=str)
        written.append(summary_path)

        logger.info(f"Exported metrics to {output_dir}")
        return written

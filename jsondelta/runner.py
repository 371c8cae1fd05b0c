"""Batch comparison runner over a folder of JSON document pairs."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from .engine import JsonDeltaEngine
from .models import DiffOptions, EngineConfig
from .settings import DiffSettings, load_settings

logger = logging.getLogger(__name__)


@dataclass
class ScenarioResult:
    """Result of comparing one dataset."""
    name: str
    dataset_path: str
    passed: bool
    expected_match: bool = True
    stats: Optional[dict] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        result = {
            "name": self.name,
            "dataset_path": self.dataset_path,
            "passed": self.passed,
            "expected_match": self.expected_match,
        }
        if self.stats:
            result["stats"] = self.stats
        if self.error:
            result["error"] = self.error
        return result


@dataclass
class GlobalReport:
    """Report across all compared datasets."""
    total: int = 0
    passed: int = 0
    failed: int = 0
    scenarios: list[ScenarioResult] = field(default_factory=list)
    breakdown: dict[str, list[str]] = field(default_factory=dict)
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')
        if not self.breakdown:
            self.breakdown = {
                "no_changes": [],
                "with_changes": [],
                "with_moves": [],
            }

    def add(self, scenario: ScenarioResult) -> None:
        self.scenarios.append(scenario)
        self.total += 1
        if scenario.passed:
            self.passed += 1
        else:
            self.failed += 1

        if scenario.stats is None:
            return
        if scenario.stats["added"] or scenario.stats["removed"]:
            self.breakdown["with_changes"].append(scenario.name)
        else:
            self.breakdown["no_changes"].append(scenario.name)
        if scenario.stats["moved"]:
            self.breakdown["with_moves"].append(scenario.name)

    def to_dict(self) -> dict:
        pass_rate = f"{(self.passed / self.total * 100):.1f}%" if self.total > 0 else "0.0%"
        return {
            "timestamp": self.timestamp,
            "summary": {
                "total_scenarios": self.total,
                "passed": self.passed,
                "failed": self.failed,
                "pass_rate": pass_rate
            },
            "breakdown": self.breakdown,
            "scenarios": [s.to_dict() for s in self.scenarios]
        }

    def print_summary(self):
        pass_rate = f"{(self.passed / self.total * 100):.1f}%" if self.total > 0 else "0.0%"
        print(f"\nComparison results: {self.passed}/{self.total} passed ({pass_rate})")
        if self.failed > 0:
            print(f"  Failed: {self.failed}")
            for scenario in self.scenarios:
                if not scenario.passed:
                    reason = scenario.error or f"expected_match={scenario.expected_match}"
                    print(f"    - {scenario.name}: {reason}")

        if self.breakdown.get("no_changes"):
            print(f"  No changes: {len(self.breakdown['no_changes'])} datasets")
        if self.breakdown.get("with_changes"):
            print(f"  With changes: {len(self.breakdown['with_changes'])} datasets")
        if self.breakdown.get("with_moves"):
            print(f"  With moved lines: {len(self.breakdown['with_moves'])} datasets")


class ComparisonRunner:
    """
    Compares every dataset in a folder.

    A dataset is a JSON file with ``left`` and ``right`` documents and
    optionally ``expected_match`` (default true) and ``exclusion_paths``
    (added to the settings' ignored paths for that dataset).

    Usage:
        runner = ComparisonRunner(load_settings("settings.yaml"))
        report = runner.run("datasets/")
        report.print_summary()
    """

    def __init__(
        self,
        settings: Optional[DiffSettings] = None,
        engine_config: Optional[EngineConfig] = None
    ):
        self.settings = settings or DiffSettings()
        self.engine = JsonDeltaEngine(engine_config)

    def _options_for(self, dataset: dict) -> DiffOptions:
        options = self.settings.to_options()
        for path in dataset.get("exclusion_paths") or []:
            if path not in options.exclusion_paths:
                options.exclusion_paths.append(path)
        return options

    def run_dataset(self, dataset: dict, name: str, dataset_path: str) -> ScenarioResult:
        """Compare a single dataset."""
        expected_match = bool(dataset.get("expected_match", True))

        if "left" not in dataset or "right" not in dataset:
            return ScenarioResult(
                name=name,
                dataset_path=dataset_path,
                passed=False,
                expected_match=expected_match,
                error="Dataset must contain 'left' and 'right' documents",
            )

        result = self.engine.compare(dataset["left"], dataset["right"], self._options_for(dataset))
        stats = {
            "added": result.added_count,
            "removed": result.removed_count,
            "moved": result.moved_count,
        }
        return ScenarioResult(
            name=name,
            dataset_path=dataset_path,
            passed=(not result.has_differences) == expected_match,
            expected_match=expected_match,
            stats=stats,
        )

    def run(self, test_dir: Union[str, Path], print_report: bool = False) -> GlobalReport:
        """
        Compare all ``*.json`` datasets in a folder, sorted by name.

        Raises:
            FileNotFoundError: if the folder does not exist
        """
        folder = Path(test_dir)
        if not folder.is_dir():
            raise FileNotFoundError(f"Datasets folder not found: {folder}")

        report = GlobalReport()
        for dataset_file in sorted(folder.glob("*.json")):
            name = dataset_file.stem
            try:
                with open(dataset_file, 'r', encoding='utf-8') as f:
                    dataset = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("Could not read dataset %s: %s", dataset_file, e)
                report.add(ScenarioResult(
                    name=name,
                    dataset_path=str(dataset_file),
                    passed=False,
                    error=f"Could not read dataset: {e}",
                ))
                continue

            if not isinstance(dataset, dict):
                dataset = {}
            scenario = self.run_dataset(dataset, name, str(dataset_file))
            if scenario.error:
                logger.warning("Dataset %s failed: %s", dataset_file, scenario.error)
            report.add(scenario)

        if print_report:
            report.print_summary()
        return report


def run_comparisons(
    test_dir: Union[str, Path],
    settings_path: Optional[Union[str, Path]] = None,
    print_report: bool = True,
    engine_config: Optional[EngineConfig] = None
) -> GlobalReport:
    """
    Run all comparisons in a folder, optionally with a settings file.

        from jsondelta.runner import run_comparisons
        report = run_comparisons("datasets/", "settings.yaml")

    Returns:
        GlobalReport with all results
    """
    settings = load_settings(settings_path) if settings_path else DiffSettings()
    runner = ComparisonRunner(settings, engine_config)
    return runner.run(test_dir, print_report=print_report)

"""Generates visualizations from measurement records."""
import logging
from pathlib import Path
from typing import Dict, Optional, Union
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .models import MeasurementRecord


# Configure logging
logger = logging.getLogger(__name__)


class VisualizationGenerator:
    """Generates visualizations from measurement records."""

    def plot_medians(self, records: Dict[str, MeasurementRecord], output_path: Union[Path, str]) -> Optional[Path]:
        """
        Generate and save a grouped bar chart of median latency per endpoint.

        Args:
            records: Measurement records keyed by configured path.
            output_path: Path to save the PNG.

        Returns:
            The saved path, or None when no endpoint has data to plot.
        """
        plottable = [record for record in records.values() if not record.is_failure]
        if not plottable:
            logger.warning("No successful endpoints to plot. Skipping chart.")
            return None

        labels = [record.path for record in plottable]
        body = [record.body.stats.median * 1000 for record in plottable]  # Convert to ms
        header = [record.header.stats.median * 1000 for record in plottable]  # Convert to ms
        x = np.arange(len(labels))
        width = 0.35

        fig, ax = plt.subplots(figsize=(max(8, len(labels) * 1.2), 6))
        bars1 = ax.bar(x - width/2, body, width, label="Body")
        bars2 = ax.bar(x + width/2, header, width, label="Header")

        # Add values on top of bars
        for bar, val in zip(bars1, body):
            ax.text(bar.get_x() + bar.get_width()/2, bar.get_height(), f'{val:.0f}', ha='center', va='bottom', fontsize=8)
        for bar, val in zip(bars2, header):
            ax.text(bar.get_x() + bar.get_width()/2, bar.get_height(), f'{val:.0f}', ha='center', va='bottom', fontsize=8)

        ax.set_title("Median Latency per Endpoint")
        ax.set_xticks(x)
        ax.set_xticklabels(labels, rotation=45, ha='right')
        ax.set_ylabel("Latency (ms)")
        ax.legend()
        ax.grid(True, axis='y', alpha=0.3)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.tight_layout()
        fig.savefig(output_path)
        plt.close(fig)
        logger.info(f"Graph saved: {output_path}")
        return output_path

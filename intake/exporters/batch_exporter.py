"""
Prospect batch exporter

Writes a launched prospect batch to CSV.
Automatically saves to output/ folder with timestamped filenames.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from core.log import get_logger
from core.models import LaunchPayload, ProspectBatch

logger = get_logger(__name__)


class BatchExporter:
    """
    Export prospect batches to CSV.

    Example:
        exporter = BatchExporter()
        path = exporter.export(batch)
    """

    COLUMNS = [
        'first_name',
        'last_name',
        'title',
        'company',
        'state',
        'email',
        'timezone',
    ]

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def to_frame(self, batch: ProspectBatch) -> pd.DataFrame:
        frame = pd.DataFrame([r.to_dict() for r in batch.records], columns=self.COLUMNS)
        return frame.fillna('')

    def export(self, batch: ProspectBatch, output_path: Optional[Union[str, Path]] = None) -> Path:
        """
        Write the batch in canonical column order.

        Args:
            batch: Prospects to write
            output_path: Target file (default: timestamped file in the output dir)

        Returns:
            Path of the written file
        """
        path = Path(output_path) if output_path else Path(self.generate_filename())
        path.parent.mkdir(parents=True, exist_ok=True)

        self.to_frame(batch).to_csv(path, index=False, encoding='utf-8')
        logger.info("Exported %d prospects to %s", len(batch), path)
        return path

    def __call__(self, payload: LaunchPayload) -> Path:
        return self.export(payload.batch)

    def generate_filename(self) -> str:
        """
        Format: {base_dir}/prospects_YYYY-MM-DD_HHMMSS.csv
        """
        # Use centralized config if base_dir not provided
        if self.base_dir is None:
            from core.config import get_config
            output_dir = get_config().get_output_dir()
        else:
            output_dir = self.base_dir

        output_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime('%Y-%m-%d_%H%M%S')
        return str(output_dir / f"prospects_{timestamp}.csv")

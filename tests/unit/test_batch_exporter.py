from __future__ import annotations

from datetime import date

import pandas as pd

from core.models import ProspectBatch, ProspectRecord
from intake.exporters import BatchExporter
from intake.wizard import launch_payload


def _batch():
    return ProspectBatch(
        records=(
            ProspectRecord("Ada", "Lovelace", "AE", "ada@x.com", state="CA", timezone="America/Los_Angeles"),
            ProspectRecord("Grace", "Hopper", "Navy", "grace@x.com", title="RADM", timezone="America/Chicago"),
        ),
        without_state_indices=(1,),
    )


def test_export_writes_canonical_columns(tmp_path):
    path = BatchExporter(tmp_path).export(_batch(), tmp_path / "batch.csv")
    frame = pd.read_csv(path, keep_default_na=False)

    assert list(frame.columns) == BatchExporter.COLUMNS
    assert frame["first_name"].tolist() == ["Ada", "Grace"]
    assert frame["timezone"].tolist() == ["America/Los_Angeles", "America/Chicago"]
    assert frame["title"].tolist() == ["", "RADM"]


def test_generated_filename_in_base_dir(tmp_path):
    name = BatchExporter(tmp_path / "out").generate_filename()
    assert name.startswith(str(tmp_path / "out" / "prospects_"))
    assert name.endswith(".csv")


def test_callable_as_launcher(tmp_path):
    payload = launch_payload(_batch(), "America/New_York", date(2026, 1, 2))
    path = BatchExporter(tmp_path)(payload)
    assert path.exists()
    assert path.parent == tmp_path

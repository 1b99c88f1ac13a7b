"""
CSV Export Module (Sync)

Uses pandas to export stored collections to flat CSV files, e.g. for a
spreadsheet view of past reviews and job matches:
- One file per collection: <data_dir>/exports/<collection>.csv
- Overwrite by default, optional timestamp suffix to keep history
- List-valued columns are joined with '; ', nested objects are flattened
"""

import pandas as pd
from pathlib import Path
from datetime import datetime
from typing import List, Optional

from models import DomainModel

LIST_SEPARATOR = "; "


class CSVExporter:
    def __init__(self, settings):
        """
        Args:
            settings (dict): Must include settings['system']['data_dir'].
        """
        data_dir = settings.get('system', {}).get('data_dir', './data')
        self.export_dir = Path(data_dir) / 'exports'

    @staticmethod
    def to_frame(entities: List[DomainModel]) -> pd.DataFrame:
        """Flatten entities into a DataFrame (camelCase columns, dotted nested keys)."""
        records = [entity.to_record() for entity in entities]
        if not records:
            return pd.DataFrame()
        df = pd.json_normalize(records)
        for column in df.columns:
            if df[column].map(lambda v: isinstance(v, list)).any():
                df[column] = df[column].map(_join_list)
        return df

    def export_collection(
        self,
        collection: str,
        entities: List[DomainModel],
        use_timestamp: bool = False
    ) -> Path:
        """
        Write the given entities to a CSV file and return its path.

        Resulting filename pattern:
            <collection>_YYYYMMDD_HHMMSS.csv   (if use_timestamp=True)
            <collection>.csv                   (otherwise)
        """
        self.export_dir.mkdir(parents=True, exist_ok=True)
        filename_parts = [collection]
        if use_timestamp:
            filename_parts.append(datetime.now().strftime("%Y%m%d_%H%M%S"))
        file_path = self.export_dir / ("_".join(filename_parts) + ".csv")

        self.to_frame(entities).to_csv(file_path, index=False)
        return file_path

    def load_export(self, collection: str, file_path: Optional[Path] = None) -> pd.DataFrame:
        """Load a previously exported collection; empty DataFrame if it does not exist."""
        path = Path(file_path) if file_path else self.export_dir / f"{collection}.csv"
        if not path.exists() or path.stat().st_size == 0:
            return pd.DataFrame()
        try:
            return pd.read_csv(path)
        except pd.errors.EmptyDataError:
            return pd.DataFrame()


def _join_list(value):
    if isinstance(value, list):
        return LIST_SEPARATOR.join(
            item if isinstance(item, str) else str(item) for item in value
        )
    return value

# dubai_horizon/storage.py
import json
import logging
import os
from typing import Dict, List, Optional

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


class JsonDataManager:
    """One JSON file holding a list of records, indexed by ``key_field``."""

    def __init__(self, data_file: str, key_field: str = "id"):
        self.data_file = data_file
        self.key_field = key_field
        self._ensure_data_file_exists()
        self._index = {}
        self._build_index()

    def _ensure_data_file_exists(self):
        if not os.path.exists(self.data_file):
            os.makedirs(os.path.dirname(self.data_file), exist_ok=True)
            with open(self.data_file, "w") as f:
                json.dump([], f)

    def _build_index(self):
        self._index = {
            str(record[self.key_field]): record
            for record in self._load_raw()
        }

    def _load_raw(self) -> List[Dict]:
        try:
            with open(self.data_file, "r") as f:
                return json.load(f)
        except (json.JSONDecodeError, FileNotFoundError):
            logger.error("Could not read %s, treating it as empty", self.data_file)
            return []

    def _save(self, records: List[Dict]):
        try:
            with open(self.data_file, "w") as f:
                json.dump(records, f, default=str)
        except OSError as e:
            logger.error("Failed to write %s: %s", self.data_file, e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to write {os.path.basename(self.data_file)}: {str(e)}"
            )

    def get_all(self) -> List[Dict]:
        return list(self._index.values())

    def get_by_id(self, record_id) -> Optional[Dict]:
        return self._index.get(str(record_id))

    def count(self) -> int:
        return len(self._index)

    def add(self, record: Dict) -> Dict:
        records = self._load_raw()
        records.append(record)
        self._save(records)
        self._index[str(record[self.key_field])] = record
        return record

    def update(self, record_id, updated_data: Dict) -> Optional[Dict]:
        records = self._load_raw()
        for i, record in enumerate(records):
            if str(record[self.key_field]) == str(record_id):
                record.update(updated_data)
                records[i] = record
                self._save(records)
                self._index[str(record_id)] = record
                return record
        return None

    def delete(self, record_id) -> bool:
        records = self._load_raw()
        remaining = [r for r in records if str(r[self.key_field]) != str(record_id)]
        if len(remaining) == len(records):
            return False
        self._save(remaining)
        self._index.pop(str(record_id), None)
        return True


def newest_first(records: List[Dict]) -> List[Dict]:
    return sorted(records, key=lambda r: str(r.get("created_at", "")), reverse=True)

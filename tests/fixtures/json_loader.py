import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional


class PayloadLoader:
    """Request payloads shared by the API tests, read once from test_data.json."""

    _data: Optional[Dict[str, Any]] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json") as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def payload(cls, key: str, **overrides: Any) -> Dict[str, Any]:
        data = copy.deepcopy(cls.load()[key])
        data.update(overrides)
        return data

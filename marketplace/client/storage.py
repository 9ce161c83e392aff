# marketplace/client/storage.py
import json
import os
from typing import Dict, Optional

from marketplace.utils.settings import CLIENT_STATE_PATH
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


class LocalStorage:
    """
    Trwaly magazyn klucz -> string w pliku JSON (jak localStorage w przegladarce).
    Kazdy set/remove od razu zapisuje plik.
    """

    def __init__(self, path: str = CLIENT_STATE_PATH):
        self.path = path
        self._data: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not os.path.isfile(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable client state {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _flush(self) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp = f"{self.path}.tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(self._data, f, ensure_ascii=False, indent=2)
        os.replace(tmp, self.path)

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._flush()

    def remove(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._flush()

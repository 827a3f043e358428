# src/shared_registry/config/defaults.py
from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    "registry": {
        "resources": ["ServerI", "ServerII", "ServerIII", "ServerIV", "ServerV"],
        "selection_policy": "random",
        "weights": {},
        "seed": None,
    },
    "logging": {
        "level": "INFO",
        "destination": "${SHARED_REGISTRY_LOG_DESTINATION:stdout}",
        "file_path": "${SHARED_REGISTRY_LOG_DIR:logs}/shared_registry.log",
        "max_size_mb": 10,
        "backup_count": 5,
    },
}

"""Configuração do pytest para o cliente Stark Infra."""

import sys
from pathlib import Path

# src/ para imports absolutos (api, app, config, utils) e a raiz para tests.fakes
root_path = Path(__file__).parent.parent
for path in (root_path / "src", root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

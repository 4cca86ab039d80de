import sys
from pathlib import Path

# Делает корень репозитория доступным для импортов модулей парсера
ROOT = Path(__file__).resolve().parent.parent
HERE = Path(__file__).resolve().parent
for path in (ROOT, HERE):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

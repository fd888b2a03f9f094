import os

# Keep pytest output free of telelog console lines.
os.environ.setdefault("KILO_ENGINE_DISABLE_CONSOLE", "1")

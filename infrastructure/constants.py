from pathlib import Path

# Repo-root conventional directories/files
CONFIG_DIR = Path("configs")
STUDIO_CONFIG_FILE = CONFIG_DIR / "studio.yaml"

# Key in a data document that names its schema file
SCHEMA_REF_KEY = "schema"

import os


def load_env_from_dotenv(dotenv_path: str = ".env") -> None:
    """
    Minimal .env loader.
    Supports lines like: KEY=value, KEY="value with spaces" and export KEY=value.
    Variables already set in the environment win over the file.
    """
    if not os.path.isfile(dotenv_path):
        return
    with open(dotenv_path, "r", encoding="utf-8") as f:
        for raw_line in f:
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            if line.startswith("export "):
                line = line[len("export "):]
            key, val = line.split("=", 1)
            key = key.strip()
            val = val.strip()
            if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
                val = val[1:-1]
            if key and key not in os.environ:
                os.environ[key] = val


def env_int(name: str, default: int) -> int:
    """Integer env var; unset or unparseable values fall back to the default."""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        print(f"Ignoring non-integer {name}={os.getenv(name)!r}, using {default}")
        return default

from pathlib import Path
from dotenv import load_dotenv


ENV_DIR = Path(__file__).resolve().parent.parent / "envs"


def loadenv(env_dir: Path | None = None) -> None:
    """Load .env files from the repository's envs directory."""
    directory = env_dir or ENV_DIR
    if not directory.exists():
        return
    for env_file in sorted(directory.glob("*.env")):
        load_dotenv(env_file, override=False)

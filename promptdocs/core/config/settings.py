# File: promptdocs/core/config/settings.py

import os
from pathlib import Path


class Settings:
    # --- Paths ---
    # promptdocs/core/config/settings.py -> config -> core -> promptdocs -> ROOT
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent

    # --- Sections ---
    # Relative paths are resolved against the process working directory.
    EXAMPLES_DIR: str = os.getenv("PROMPT_EXAMPLES_DIR", "lib/examples")
    EXAMPLES_TITLE: str = os.getenv("PROMPT_EXAMPLES_TITLE", "Code Examples")
    DOCS_DIR: str = os.getenv("PROMPT_DOCS_DIR", "lib/docs")
    DOCS_TITLE: str = os.getenv("PROMPT_DOCS_TITLE", "Documentation")

    # --- Diagnostics ---
    # Same syntax as the `debug` package: "prompt:*" or "prompt:info,prompt:db"
    DEBUG_NAMESPACES: str = os.getenv("PROMPT_DEBUG", "")

    @property
    def DEBUG_ENABLED(self) -> bool:
        return bool(self.DEBUG_NAMESPACES.strip())


settings = Settings()

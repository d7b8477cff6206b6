import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=Path.cwd)

    BOARD_PATH: Path = field(init=False)
    WORD_LIST_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 1
    PARALLEL: bool = True
    MAX_WORKERS: int = 0
    MAX_RESULTS: int = 0

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    def __post_init__(self):
        self.BOARD_PATH = self.BASE_DIR / "board.txt"
        self.WORD_LIST_PATH = self.BASE_DIR / "words.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                current = getattr(self, fld)
                setattr(self, fld, _coerce(current, env_val))


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    elif isinstance(current, int):
        return int(value)
    elif isinstance(current, float):
        return float(value)
    elif isinstance(current, Path):
        return Path(value)
    return str(value)


# Fields that may be changed at runtime through the API
EDITABLE_FIELDS: dict[str, type] = {
    "MIN_WORD_LENGTH": int,
    "PARALLEL": bool,
    "MAX_WORKERS": int,
    "MAX_RESULTS": int,
    "DEBUG": bool,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply ``values`` to ``cfg``. Returns an error message per rejected field."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            errors[name] = "not an editable setting"
            continue
        try:
            coerced = _coerce(getattr(cfg, name), value)
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid {EDITABLE_FIELDS[name].__name__}: {e}"
            continue
        if isinstance(coerced, int) and not isinstance(coerced, bool) and coerced < 0:
            errors[name] = "must not be negative"
            continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()

########## ini_config.py

import codecs
import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path

from qperf_web.domain.models import QuestionType

INI_DEFAULT_NAME = "QPerformance.ini"


@dataclass(frozen=True)
class AppSettings:
    engine_path: Path
    timeout_seconds: int
    report_encoding: str

    # toggles pre-checked when the form is first shown
    default_types: tuple[QuestionType, ...]

    flask_host: str
    flask_port: int
    flask_debug: bool

    log_level: str


class IniConfig:
    """
    Adapter around ConfigParser and filesystem resolution.
    Keeps INI handling out of the service code.
    """

    def __init__(self, ini_path: Path):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @property
    def ini_path(self) -> Path:
        return self._ini_path

    @staticmethod
    def from_env_or_default() -> "IniConfig":
        ini_raw = (os.getenv("APP_INI") or "").strip()
        # If APP_INI is not set, default to repo-root-relative ini location
        ini_path = Path(ini_raw) if ini_raw else (Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME)
        return IniConfig(ini_path)

    def _cfg_path(self, section: str, key: str) -> Path:
        """
        Reads a filesystem path from INI and resolves it.
        Relative paths are taken from the INI file's folder, not the working directory.
        """
        raw = (self._cfg.get(section, key, fallback="") or "").strip()
        if not raw:
            raise FileNotFoundError(f"Missing INI value for {key} in [{section}]")

        p = Path(os.path.expandvars(os.path.expanduser(raw)))
        if not p.is_absolute():
            p = Path(self._ini_path).resolve().parent / p
        return p.resolve()

    def _report_encoding(self) -> str:
        raw = (self._cfg.get("execution", "report_encoding", fallback="utf-8") or "").strip() or "utf-8"
        try:
            codecs.lookup(raw)
        except LookupError as e:
            raise ValueError(f"Unknown [execution] report_encoding: {raw}") from e
        return raw

    def _default_types(self) -> tuple[QuestionType, ...]:
        raw = (self._cfg.get("types", "default_selected", fallback="AGIQRSXVM") or "").strip().upper()
        codes = [c for c in raw if c not in " ,"]
        unknown = sorted({c for c in codes if c not in QuestionType.__members__})
        if unknown:
            raise ValueError(f"Unknown question type code(s) in [types] default_selected: {', '.join(unknown)}")
        # index order, regardless of how the INI lists them
        return tuple(t for t in QuestionType if t.value in codes)

    def load_settings(self) -> AppSettings:
        # Required paths
        engine_path = self._cfg_path("paths", "engine_path")

        # Execution
        timeout_seconds = self._cfg.getint("execution", "timeout_seconds", fallback=600)
        report_encoding = self._report_encoding()

        default_types = self._default_types()

        # Flask
        flask_host = (self._cfg.get("flask", "host", fallback="127.0.0.1") or "").strip() or "127.0.0.1"
        flask_port = self._cfg.getint("flask", "port", fallback=5000)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=False)

        log_level = (self._cfg.get("logging", "level", fallback="INFO") or "").strip().upper() or "INFO"

        # Validate
        if not engine_path.exists():
            raise FileNotFoundError(f"qperf engine not found: {engine_path}")

        return AppSettings(
            engine_path=engine_path,
            timeout_seconds=timeout_seconds,
            report_encoding=report_encoding,
            default_types=default_types,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
            log_level=log_level,
        )

"""Runtime configuration model."""

from __future__ import annotations

from dataclasses import dataclass

from .validation import validate_runtime_constraints

DEFAULT_TLDS: tuple[str, ...] = (".com", ".net", ".org", ".io", ".cloud", ".agency")
DEFAULT_MIN_LENGTH = 3
DEFAULT_MAX_LENGTH = 5
DEFAULT_DELAY_MS = 50
DEFAULT_WORDS_FILE = "words_alpha.txt"
DEFAULT_NAMES_FILE = "us.txt"
DEFAULT_OUTPUT = "available_domains.txt"
DEFAULT_REQUEST_TIMEOUT = 15.0
DEFAULT_USER_AGENT = "DomainChecker/1.0"


@dataclass(frozen=True)
class ScanConfig:
    """Validated configuration used by the scan pipeline."""

    tlds: tuple[str, ...] = DEFAULT_TLDS
    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH
    use_names: bool = False
    delay_ms: int = DEFAULT_DELAY_MS
    words_file: str = DEFAULT_WORDS_FILE
    names_file: str = DEFAULT_NAMES_FILE
    output: str = DEFAULT_OUTPUT
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    show_progress: bool = True

    def __post_init__(self) -> None:
        validate_runtime_constraints(
            tlds=self.tlds,
            min_length=self.min_length,
            max_length=self.max_length,
            delay_ms=self.delay_ms,
            request_timeout=self.request_timeout,
        )

    @property
    def source_file(self) -> str:
        """Word list selected by the names/words mode."""
        return self.names_file if self.use_names else self.words_file

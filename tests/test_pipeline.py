import logging
from pathlib import Path

from domain_checker.config import ScanConfig
from domain_checker.models import Availability, AvailabilityResult, ScanCounters
from domain_checker.pipeline import iter_domains, run_pipeline, run_scan
from domain_checker.sink import AvailableDomainLog


class DummyClient:
    def __init__(self, outcomes: dict[str, Availability] | None = None) -> None:
        self.outcomes = outcomes or {}
        self.calls: list[str] = []

    def check(self, domain: str) -> AvailabilityResult:
        self.calls.append(domain)
        status = self.outcomes.get(domain, Availability.TAKEN)
        reason = {"available": "inactive", "taken": "active", "error": "boom"}[status.value]
        return AvailabilityResult(domain=domain, status=status, reason=reason)


class MemorySink:
    def __init__(self) -> None:
        self.recorded: list[str] = []

    def record(self, domain: str) -> None:
        self.recorded.append(domain)


def _config(**overrides: object) -> ScanConfig:
    options: dict[str, object] = {"tlds": (".io", ".dev"), "show_progress": False}
    options.update(overrides)
    return ScanConfig(**options)  # type: ignore[arg-type]


def _scan(words: list[str], config: ScanConfig, client: DummyClient, sink: MemorySink):
    lines: list[str] = []
    sleeps: list[float] = []
    counters = run_scan(
        words,
        config,
        client=client,
        sink=sink,
        sleep_fn=sleeps.append,
        emit=lines.append,
        color=False,
        logger=logging.getLogger("test"),
    )
    return counters, lines, sleeps


def test_iter_domains_tld_outer_word_inner() -> None:
    domains = [domain for _tld, domain in iter_domains(["w1", "w2"], [".t1", ".t2"])]
    assert domains == ["w1.t1", "w2.t1", "w1.t2", "w2.t2"]


def test_run_scan_checks_in_order_and_records_available() -> None:
    client = DummyClient({"cat.io": Availability.AVAILABLE, "dog.dev": Availability.ERROR})
    sink = MemorySink()
    counters, lines, sleeps = _scan(["cat", "dog"], _config(), client, sink)

    assert client.calls == ["cat.io", "dog.io", "cat.dev", "dog.dev"]
    assert counters == ScanCounters(total_checked=4, available_count=1, errors=1)
    assert sink.recorded == ["cat.io"]
    assert sleeps == [0.05] * 4
    assert "\nChecking domains with .io:" in lines
    assert "cat.io is AVAILABLE!" in lines
    assert "dog.io is taken (active)" in lines
    assert "Error checking dog.dev: boom" in lines
    assert lines[-1] == "Check complete! Found 1 available domains out of 4 checked."


def test_progress_emitted_on_every_tenth_check() -> None:
    words = [f"w{chr(97 + i)}" for i in range(12)]
    counters, lines, _sleeps = _scan(words, _config(), DummyClient(), MemorySink())
    progress = [line for line in lines if line.startswith("Progress:")]
    assert counters.total_checked == 24
    assert progress == [
        "Progress: 10/24 checked, 0 available",
        "Progress: 20/24 checked, 0 available",
    ]


def test_run_scan_with_no_tlds_checks_nothing() -> None:
    client = DummyClient()
    counters, lines, sleeps = _scan(["cat"], _config(tlds=()), client, MemorySink())
    assert counters.total_checked == 0
    assert client.calls == []
    assert sleeps == []
    assert lines == ["Check complete! Found 0 available domains out of 0 checked."]


def test_run_scan_uses_configured_delay() -> None:
    _counters, _lines, sleeps = _scan(
        ["cat"], _config(tlds=(".io",), delay_ms=0), DummyClient(), MemorySink()
    )
    assert sleeps == [0.0]


def test_run_scan_available_domain_written_once(tmp_path: Path) -> None:
    output = tmp_path / "available_domains.txt"
    client = DummyClient({"apple.io": Availability.AVAILABLE})
    run_scan(
        ["apple"],
        _config(tlds=(".io",)),
        client=client,
        sink=AvailableDomainLog(str(output)),
        sleep_fn=lambda _seconds: None,
        emit=lambda _line: None,
        logger=logging.getLogger("test"),
    )
    assert output.read_text(encoding="utf-8") == "apple.io\n"


def test_run_pipeline_wires_domainr_client(monkeypatch, tmp_path: Path) -> None:
    captured: dict[str, object] = {}

    def fake_run_scan(words, config, *, client, sink, logger):
        captured["words"] = words
        captured["client"] = client
        captured["sink"] = sink
        return ScanCounters(total_checked=1)

    monkeypatch.setattr("domain_checker.pipeline.run_scan", fake_run_scan)
    config = _config(output=str(tmp_path / "out.txt"))
    counters = run_pipeline(config, ["cat"], api_key="key", logger=logging.getLogger("test"))

    assert counters.total_checked == 1
    assert captured["words"] == ["cat"]
    assert type(captured["client"]).__name__ == "DomainrClient"
    assert isinstance(captured["sink"], AvailableDomainLog)


def test_failed_record_is_reported_as_error_and_scan_continues() -> None:
    class ReadOnlySink:
        def record(self, domain: str) -> None:
            raise PermissionError(f"read-only filesystem: {domain}")

    client = DummyClient({"cat.io": Availability.AVAILABLE, "dog.io": Availability.AVAILABLE})
    lines: list[str] = []
    counters = run_scan(
        ["cat", "dog"],
        _config(tlds=(".io",)),
        client=client,
        sink=ReadOnlySink(),
        sleep_fn=lambda _seconds: None,
        emit=lines.append,
        color=False,
        logger=logging.getLogger("test"),
    )

    assert client.calls == ["cat.io", "dog.io"]
    assert counters == ScanCounters(total_checked=2, available_count=0, errors=2)
    assert any(line.startswith("Error checking cat.io: could not record") for line in lines)
    assert lines[-1] == "Check complete! Found 0 available domains out of 2 checked."

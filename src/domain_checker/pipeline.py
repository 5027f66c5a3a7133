"""Core scan orchestration."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence

from tqdm import tqdm

from .config import ScanConfig
from .domainr import DomainrClient, make_session
from .models import (
    Availability,
    AvailabilityClient,
    AvailabilityResult,
    ResultSink,
    ScanCounters,
)
from .presentation import format_progress, format_summary, render_result
from .sink import AvailableDomainLog
from .validation import blocking_sleep

SleepFn = Callable[[float], None]
EmitFn = Callable[[str], None]

PROGRESS_EVERY = 10


def iter_domains(words: Sequence[str], tlds: Sequence[str]) -> Iterator[tuple[str, str]]:
    """Yield ``(tld, domain)`` pairs, TLD outer and word inner."""
    for tld in tlds:
        for word in words:
            yield tld, word + tld


def _record_available(
    result: AvailabilityResult, sink: ResultSink, logger: logging.Logger
) -> AvailabilityResult:
    """Persist an available domain; a failed write turns the result into an error."""
    try:
        sink.record(result.domain)
    except OSError as exc:
        logger.debug("Recording %s failed: %s", result.domain, exc)
        return AvailabilityResult(
            domain=result.domain, status=Availability.ERROR, reason=f"could not record: {exc}"
        )
    return result


def run_scan(
    words: Sequence[str],
    config: ScanConfig,
    *,
    client: AvailabilityClient,
    sink: ResultSink,
    sleep_fn: SleepFn = blocking_sleep,
    emit: EmitFn = tqdm.write,
    color: bool = True,
    logger: logging.Logger,
) -> ScanCounters:
    """Check every word/TLD pair sequentially and return the run's counters."""
    counters = ScanCounters()
    total = len(words) * len(config.tlds)
    logger.info("Checking %d domains across %d TLDs", total, len(config.tlds))

    progress = tqdm(total=total, desc="checking domains", disable=not config.show_progress)
    current_tld: str | None = None
    try:
        for tld, domain in iter_domains(words, config.tlds):
            if tld != current_tld:
                current_tld = tld
                emit(f"\nChecking domains with {tld}:")

            result = client.check(domain)
            if result.available:
                result = _record_available(result, sink, logger)
            counters.total_checked += 1
            if result.available:
                counters.available_count += 1
            elif result.status is Availability.ERROR:
                counters.errors += 1
            emit(render_result(result, color=color))
            progress.update(1)

            if counters.total_checked % PROGRESS_EVERY == 0:
                emit(format_progress(counters, total))

            sleep_fn(config.delay_ms / 1000.0)
    finally:
        progress.close()

    emit(format_summary(counters))
    if counters.errors:
        logger.warning("%d checks failed and were counted as unavailable.", counters.errors)
    return counters


def run_pipeline(
    config: ScanConfig, words: Sequence[str], *, api_key: str, logger: logging.Logger
) -> ScanCounters:
    """Build concrete dependencies and execute the scan."""
    session = make_session(config.user_agent)
    client = DomainrClient(
        session=session,
        api_key=api_key,
        timeout=config.request_timeout,
        logger=logger,
    )
    sink = AvailableDomainLog(config.output)
    try:
        return run_scan(words, config, client=client, sink=sink, logger=logger)
    finally:
        session.close()

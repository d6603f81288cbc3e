"""Plain-text admin activity reports built from the audit log."""
from collections import Counter
from datetime import datetime, timezone

from practice_site.application.audit_logs import available_months, logs_for_month

SEPARATOR = "=" * 70


def _format_entry(log):
    when = log.created_at.strftime("%Y-%m-%d %H:%M:%S")
    target = f" {log.entity_type}:{log.entity_id}" if log.entity_type else ""
    line = f"[{when}] {log.status:<7} {log.action}{target} ip={log.ip or '-'}"
    if log.payload:
        line += f" payload={log.payload}"
    return line


def generate_text_report(month: str) -> str:
    changes = logs_for_month(month, "change")
    accesses = logs_for_month(month, "access")
    failed = sum(1 for log in accesses if log.status == "FAILED")
    actions = Counter(log.action for log in changes)

    lines = [
        SEPARATOR,
        f"ADMIN ACTIVITY REPORT - {month}",
        f"Generated at {datetime.now(timezone.utc):%Y-%m-%d %H:%M:%S} UTC",
        SEPARATOR,
        "",
        f"Changes: {len(changes)}",
        f"Accesses: {len(accesses)} ({failed} failed)",
        "",
    ]

    if actions:
        lines.append("Changes by action:")
        lines.extend(f"  {action}: {count}" for action, count in actions.most_common())
        lines.append("")

    lines.append("-- Changes --")
    lines.extend(_format_entry(log) for log in changes)
    if not changes:
        lines.append("(none)")

    lines += ["", "-- Accesses --"]
    lines.extend(_format_entry(log) for log in accesses)
    if not accesses:
        lines.append("(none)")

    return "\n".join(lines) + "\n"


def generate_summary_report() -> str:
    months = available_months()

    lines = [
        SEPARATOR,
        "ADMIN ACTIVITY SUMMARY",
        f"Generated at {datetime.now(timezone.utc):%Y-%m-%d %H:%M:%S} UTC",
        SEPARATOR,
        "",
    ]

    if not months:
        lines.append("No activity recorded.")

    for month in months:
        changes = logs_for_month(month, "change")
        accesses = logs_for_month(month, "access")
        failed = sum(1 for log in accesses if log.status == "FAILED")
        lines.append(
            f"{month}: {len(changes)} changes, {len(accesses)} accesses ({failed} failed)"
        )

    return "\n".join(lines) + "\n"

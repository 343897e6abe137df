"""Prometheus text exposition encoder for gauge samples."""

import math
from collections.abc import Iterable, Mapping

from keeper_telemetry.core.models import MetricSample

CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


def _escape_label_value(value: str) -> str:
    """Escape a label value per the exposition format."""
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def _escape_help(text: str) -> str:
    return text.replace("\\", "\\\\").replace("\n", "\\n")


def _format_value(value: float) -> str:
    """Format a sample value; integers keep their exact digits."""
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return repr(float(value))


def _format_labels(labels: dict[str, str]) -> str:
    if not labels:
        return ""
    pairs = ",".join(f'{k}="{_escape_label_value(v)}"' for k, v in labels.items())
    return "{" + pairs + "}"


def encode_samples(
    samples: Iterable[MetricSample],
    descriptions: Mapping[str, str] | None = None,
) -> str:
    """Encode gauge samples to Prometheus text format.

    Samples are grouped by metric name in first-seen order. Each group gets
    a TYPE line, and a HELP line when a description is known.

    Args:
        samples: Current gauge samples.
        descriptions: Optional help text per metric name.

    Returns:
        Exposition text ending in a newline, or an empty string.
    """
    descriptions = descriptions or {}
    grouped: dict[str, list[MetricSample]] = {}
    for sample in samples:
        grouped.setdefault(sample.name, []).append(sample)

    lines: list[str] = []
    for name, group in grouped.items():
        if name in descriptions:
            lines.append(f"# HELP {name} {_escape_help(descriptions[name])}")
        lines.append(f"# TYPE {name} gauge")
        for sample in group:
            lines.append(
                f"{name}{_format_labels(sample.labels)} {_format_value(sample.value)}"
            )

    if not lines:
        return ""
    return "\n".join(lines) + "\n"

"""
Prometheus text exposition format (v0.0.4), the small subset we need:
gauges and counters with at most one label. No external deps.

PromWriter builds a document, parse_exposition reads one back.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Set, Tuple

CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

# Integral values at or above this print through the decimal path instead
_INT_LIMIT = 1e15

Label = Tuple[str, str]


def format_value(value: float) -> str:
    """Shortest faithful text for a sample value.

    Whole numbers print without a fractional part ("10100", not "10100.0"),
    everything else prints the shortest decimal that round-trips, never in
    exponent notation.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == math.trunc(value) and abs(value) < _INT_LIMIT:
        return str(int(value))
    # repr() already picks the shortest round-trip digits, Decimal drops the exponent
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def escape_label_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


class PromWriter:
    """Accumulates samples for one scrape.

    The HELP/TYPE header for a metric is written once, right before its
    first sample. Later calls for the same name only add sample lines, and
    their help text is ignored.
    """

    def __init__(self):
        self._lines: List[str] = []
        self._declared: Set[str] = set()

    def gauge(self, name: str, help_text: str, value: float, label: Optional[Label] = None):
        self._emit(name, "gauge", help_text, value, label)

    def counter(self, name: str, help_text: str, value: float, label: Optional[Label] = None):
        self._emit(name, "counter", help_text, value, label)

    def _emit(self, name: str, metric_type: str, help_text: str,
              value: float, label: Optional[Label]):
        if name not in self._declared:
            if help_text:
                self._lines.append(f"# HELP {name} {help_text}")
            self._lines.append(f"# TYPE {name} {metric_type}")
            self._declared.add(name)

        if label is not None:
            key, label_value = label
            self._lines.append(
                f'{name}{{{key}="{escape_label_value(label_value)}"}} {format_value(value)}'
            )
        else:
            self._lines.append(f"{name} {format_value(value)}")

    def render(self) -> str:
        if not self._lines:
            return ""
        return "\n".join(self._lines) + "\n"


@dataclass
class MetricSample:
    name: str
    labels: Dict[str, str]
    value: float


@dataclass
class MetricFamily:
    name: str
    metric_type: str  # "gauge", "counter" or "untyped"
    help_text: str
    samples: List[MetricSample] = field(default_factory=list)
    # how many TYPE lines the document carried for this name
    declarations: int = 0


# Matches key="value" pairs inside braces, allowing escaped quotes
_LABEL_RE = re.compile(r'(\w+)="((?:[^"\\]|\\.)*)"')


def _unescape(value: str) -> str:
    return re.sub(r"\\(.)", lambda m: "\n" if m.group(1) == "n" else m.group(1), value)


def parse_labels(label_str: str) -> Dict[str, str]:
    if not label_str:
        return {}
    return {key: _unescape(value) for key, value in _LABEL_RE.findall(label_str)}


def parse_exposition(text: str) -> Dict[str, MetricFamily]:
    """Read a document back into families keyed by metric name, in document order."""
    families: Dict[str, MetricFamily] = {}

    def family(name: str) -> MetricFamily:
        if name not in families:
            families[name] = MetricFamily(name=name, metric_type="untyped", help_text="")
        return families[name]

    for line in text.split("\n"):
        line = line.strip()

        if not line:
            continue

        if line.startswith("# HELP "):
            parts = line[7:].split(" ", 1)
            if len(parts) == 2:
                family(parts[0]).help_text = parts[1]
            continue

        if line.startswith("# TYPE "):
            parts = line[7:].split(" ", 1)
            if len(parts) == 2:
                fam = family(parts[0])
                fam.metric_type = parts[1]
                fam.declarations += 1
            continue

        if line.startswith("#"):
            continue

        brace_start = line.find("{")
        if brace_start != -1:
            name = line[:brace_start]
            brace_end = line.rfind("}")
            label_str = line[brace_start + 1:brace_end]
            rest = line[brace_end + 1:].split()
        else:
            name, _, remainder = line.partition(" ")
            label_str = ""
            rest = remainder.split()

        if not rest:
            continue

        try:
            value = float(rest[0])
        except ValueError:
            continue

        family(name).samples.append(
            MetricSample(name=name, labels=parse_labels(label_str), value=value)
        )

    return families


def get_value(families: Dict[str, MetricFamily], name: str, **labels: str) -> Optional[float]:
    """First sample value of `name` whose labels include `labels`."""
    fam = families.get(name)
    if not fam:
        return None
    for sample in fam.samples:
        if all(sample.labels.get(k) == v for k, v in labels.items()):
            return sample.value
    return None

from __future__ import annotations

from typing import Protocol

from domain.models import Chart, TimelinePlan
from domain.style import ChartStyle


class LayoutEngine(Protocol):
    def build_plan(self, chart: Chart, style: ChartStyle) -> TimelinePlan:
        ...

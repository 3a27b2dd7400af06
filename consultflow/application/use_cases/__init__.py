"""Application use cases package."""

from .build_pl_report import BuildProfitAndLossUseCase, ProfitAndLossReport
from .get_drilldown import GetDrillDownUseCase
from .load_report_data import LoadReportDataUseCase, ReportDataResult

__all__ = [
    "BuildProfitAndLossUseCase",
    "ProfitAndLossReport",
    "GetDrillDownUseCase",
    "LoadReportDataUseCase",
    "ReportDataResult",
]

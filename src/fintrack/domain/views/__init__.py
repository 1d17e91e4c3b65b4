"""View models for service outputs."""

from fintrack.domain.views.reports import MonthlyBalance, CategoryTotal

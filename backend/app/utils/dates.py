"""日期工具（服役区间相关计算）"""
from datetime import date

MIN_SERVICE_DAYS = 365
MAX_SERVICE_DAYS = 1500


def days_between(start: date, end: date) -> int:
    """start 到 end 的整天数，end 在前时为负"""
    return (end - start).days


def is_valid_service_period(entry_date: date, discharge_date: date) -> bool:
    """服役时长在 [365, 1500] 天之间（含边界）"""
    return MIN_SERVICE_DAYS <= days_between(entry_date, discharge_date) <= MAX_SERVICE_DAYS


def calculate_service_progress(entry_date: date, discharge_date: date, today: date) -> float:
    """服役进度百分比，限制在 [0, 100]"""
    total_days = days_between(entry_date, discharge_date)
    if total_days <= 0:
        return 0.0

    passed_days = days_between(entry_date, today)
    progress = passed_days / total_days * 100
    return round(min(max(progress, 0.0), 100.0), 2)

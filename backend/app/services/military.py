"""服役 D-day 服务"""
import logging
from datetime import date
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from ..models import User
from ..repositories import UserRepository
from ..schemas import DDayInfo, ServiceStatus, UserInfo
from ..utils.dates import (
    MAX_SERVICE_DAYS,
    MIN_SERVICE_DAYS,
    calculate_service_progress,
    days_between,
    is_valid_service_period,
)
from ..utils.validation import is_valid_github_id
from .results import (
    InvalidDates,
    Result,
    ServiceDatesNotSet,
    Success,
    UserNotFound,
    invalid_github_id,
)

logger = logging.getLogger(__name__)


class MilitaryService:
    """入伍/退伍日期的设置和 D-day 计算"""

    def __init__(self, users: UserRepository, today: Callable[[], date] = date.today):
        self.users = users
        self.today = today

    def validate_service_dates(self, entry_date: date, discharge_date: date):
        """返回 InvalidDates，合法时返回 None"""
        if entry_date >= discharge_date:
            return InvalidDates("入伍日期必须早于退伍日期")
        if entry_date > self.today():
            return InvalidDates("入伍日期不能晚于今天")
        if not is_valid_service_period(entry_date, discharge_date):
            return InvalidDates(
                f"服役时长异常，应在 {MIN_SERVICE_DAYS} 到 {MAX_SERVICE_DAYS} 天之间"
            )
        return None

    async def set_service_dates(
        self, db: AsyncSession, github_id: str, entry_date: date, discharge_date: date
    ) -> Result[UserInfo]:
        """设置服役日期，两个字段一起写入"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)

        invalid = self.validate_service_dates(entry_date, discharge_date)
        if invalid is not None:
            return invalid

        user = await self.users.find_by_github_id(db, github_id)
        if user is None:
            logger.warning(f"[Military] 设置服役日期失败，用户不存在: {github_id}")
            return UserNotFound.for_github_id(github_id)

        user.entry_date = entry_date
        user.discharge_date = discharge_date
        user = await self.users.save(db, user)

        logger.info(f"[Military] 服役日期已设置: {github_id} 入伍={entry_date} 退伍={discharge_date}")
        return Success(UserInfo.model_validate(user), message="服役日期设置成功")

    async def get_d_day_info(self, db: AsyncSession, github_id: str) -> Result[DDayInfo]:
        """查询 D-day 信息"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)

        user = await self.users.find_by_github_id(db, github_id)
        if user is None:
            return UserNotFound.for_github_id(github_id)
        if not user.has_service_dates:
            return ServiceDatesNotSet()

        return Success(self.calculate_d_day_info(user))

    def calculate_d_day_info(self, user: User) -> DDayInfo:
        today = self.today()
        return DDayInfo(
            d_day_count=days_between(today, user.discharge_date),
            # 入伍日期在今天之后时保留负数，进度百分比另外做了截断
            service_days_elapsed=days_between(user.entry_date, today),
            total_service_days=days_between(user.entry_date, user.discharge_date),
            entry_date=user.entry_date,
            discharge_date=user.discharge_date,
            progress_percentage=calculate_service_progress(user.entry_date, user.discharge_date, today),
        )

    async def get_service_status(self, db: AsyncSession, github_id: str) -> Result[ServiceStatus]:
        """服役状态：未找到 / 未设置 / 入伍前 / 服役中 / 已退伍"""
        if not is_valid_github_id(github_id):
            return invalid_github_id(github_id)

        user = await self.users.find_by_github_id(db, github_id)
        if user is None:
            return Success(ServiceStatus.USER_NOT_FOUND)
        if not user.has_service_dates:
            return Success(ServiceStatus.NOT_SET)

        today = self.today()
        if today < user.entry_date:
            return Success(ServiceStatus.BEFORE_ENTRY)
        if today > user.discharge_date:
            return Success(ServiceStatus.DISCHARGED)
        return Success(ServiceStatus.SERVING)

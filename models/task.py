from datetime import datetime, timezone
from .base import BaseModel
from sqlalchemy import Column, Text, Boolean, DateTime


def utcnow():
    """当前UTC时间（不带时区信息，SQLite不保存时区）"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Task(BaseModel):
    __tablename__ = 'tasks'
    # AUTOINCREMENT: 删除后的ID不会被复用
    __table_args__ = {'sqlite_autoincrement': True}

    description = Column(Text, nullable=False)
    is_completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    def to_dict(self):
        """转换为API响应格式（camelCase）"""
        created_at = self.created_at
        return {
            'id': self.id,
            'description': self.description,
            'isCompleted': bool(self.is_completed),
            'createdAt': created_at.isoformat() + 'Z' if created_at else None,
        }

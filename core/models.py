"""Data модель проекта с Pydantic валидацией"""
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict

HOURS_SCALE = Decimal("0.01")


def to_hours(value: Decimal) -> Decimal:
    """Приведение количества часов к двум знакам после запятой"""
    with localcontext() as ctx:
        # Точности должно хватать на все цифры целой части плюс две дробные
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(HOURS_SCALE, rounding=ROUND_HALF_UP)


class Project(BaseModel):
    """Проект: одна запись в таблице project"""
    model_config = ConfigDict(validate_assignment=True)

    project_id: Optional[int] = None  # Назначается хранилищем при создании
    project_name: Optional[str] = None
    estimated_hours: Optional[Decimal] = None
    actual_hours: Optional[Decimal] = None
    difficulty: Optional[int] = None  # Ожидается 1-5, не проверяется
    notes: Optional[str] = None

    @field_validator('estimated_hours', 'actual_hours')
    @classmethod
    def validate_hours_scale(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        if v is None:
            return v
        if not v.is_finite():
            raise ValueError('Hours must be a finite number')
        return to_hours(v)

    def __str__(self) -> str:
        """Строковое представление"""
        return (
            f"ID={self.project_id}, name={self.project_name}, "
            f"estimated hours={self.estimated_hours}, actual hours={self.actual_hours}, "
            f"difficulty={self.difficulty}, notes={self.notes}"
        )


def merge_project(current: Project, **changes) -> Project:
    """
    Частичное обновление: поле берется из changes, если значение не None,
    иначе остается текущим. ID всегда сохраняется.
    """
    invalid = set(changes) - (set(Project.model_fields) - {'project_id'})
    if invalid:
        raise TypeError(f"Cannot update fields: {', '.join(sorted(invalid))}")

    data = current.model_dump()
    data.update({name: value for name, value in changes.items() if value is not None})
    return Project(**data)

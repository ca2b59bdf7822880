"""
Маппинг объектов по именам полей.

Заполняет поля целевой pydantic-модели значениями одноименных
атрибутов источника. Регистр имен учитывается, преобразований нет.
Поля, которых нет в источнике, получают значения по умолчанию
целевой модели.
"""

from typing import Any, Type, TypeVar

from pydantic import BaseModel

TTarget = TypeVar("TTarget", bound=BaseModel)


def _unwrap(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, (list, tuple)):
        return [_unwrap(item) for item in value]
    return value


def adapt(source: Any, target_type: Type[TTarget], **overrides: Any) -> TTarget:
    """
    Преобразовать объект в экземпляр target_type.

    Args:
        source: Исходный объект (pydantic-модель или любой объект с атрибутами)
        target_type: Целевая pydantic-модель
        **overrides: Явные значения для полей целевой модели

    Returns:
        Экземпляр target_type

    Пример:
        >>> command = adapt(request, CreateProductCommand)
    """
    data = {
        name: _unwrap(getattr(source, name))
        for name in target_type.model_fields
        if hasattr(source, name)
    }
    data.update(overrides)
    return target_type.model_validate(data)

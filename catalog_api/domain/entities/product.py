"""
Товар каталога.
"""

from decimal import Decimal
from typing import List

from .document import Document


class Product(Document):
    """
    Товар в каталоге.

    Поля копируются из команды как есть: без значений по умолчанию
    со стороны бизнес-логики, без валидации и нормализации.

    Атрибуты:
        id: Идентификатор (назначается сессией при сохранении)
        name: Название
        category: Упорядоченный список категорий
        description: Описание
        image_file: Ссылка на изображение
        price: Цена
    """

    name: str
    category: List[str]
    description: str
    image_file: str
    price: Decimal

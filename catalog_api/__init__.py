"""Catalog API: сервис каталога товаров."""

"""
Building Blocks: общие примитивы для сервисов каталога.

Содержит контракты CQRS (команды, запросы, обработчики, медиатор)
и маппинг объектов по именам полей.
"""

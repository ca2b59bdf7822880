"""
Application layer: команды, запросы и их обработчики.
"""

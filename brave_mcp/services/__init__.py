"""Сервисный слой: клиент Brave API, лимитер и сценарии поиска."""
